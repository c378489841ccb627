import marimo

__generated_with = "0.13.10"
app = marimo.App(width="full", app_title="Scratchpad")


# ---------------------------------------------------------------------------
# Bootstrap: paths, config, extension
# ---------------------------------------------------------------------------


@app.cell
def _setup():
    import os
    import sys
    from pathlib import Path

    _ROOT = Path(__file__).parent.parent
    _SRC = _ROOT / "src"
    _WORKSPACE = Path(os.getenv("SCRATCHPAD_WORKSPACE", str(_ROOT)))

    if str(_SRC) not in sys.path:
        sys.path.insert(0, str(_SRC))

    from scratchpad.config import load_config
    from scratchpad.log import setup_logging

    config = load_config(_WORKSPACE)
    setup_logging(config.log_level)
    return (config,)


# ---------------------------------------------------------------------------
# Reactive state
# ---------------------------------------------------------------------------


@app.cell
def _state(mo):
    open_path = mo.state("")
    selected_name = mo.state("")
    message = mo.state(("", False))
    revision = mo.state(0)
    return message, open_path, revision, selected_name


# ---------------------------------------------------------------------------
# Host ports
# ---------------------------------------------------------------------------


@app.cell
def _ports(config, message, open_path):
    from concurrent.futures import Future

    from scratchpad.extension import ScratchpadExtension
    from scratchpad.fs import LocalFileSystem

    class _NotebookHandle:
        """The notebook editor pane has no caret; the position is only recorded."""

        def __init__(self, path):
            self.path = path
            self.cursor = None

        def set_cursor(self, row, column):
            self.cursor = (row, column)

    class _NotebookEditor:
        """EditorPort backed by notebook widgets.

        Palettes are answered from whatever the widget held when the command
        button was pressed (``pending_input`` / ``pending_choice``).
        """

        def __init__(self):
            self.pending_input = None
            self.pending_choice = None

        def open_file(self, path):
            open_path[1](str(path))
            future = Future()
            future.set_result(_NotebookHandle(path))
            return future

        def show_input(self, prompt):
            return self.pending_input

        def show_choice(self, items, placeholder=""):
            if self.pending_choice in items:
                return list(items).index(self.pending_choice)
            return None

        def show_message(self, text, *, error=False):
            message[1]((text, error))

    editor = _NotebookEditor()
    fs = LocalFileSystem()
    extension = ScratchpadExtension(config, fs, editor)
    extension.activate()
    # Last tree generation the sidebar was rendered for
    seen = {"generation": extension.tree.generation}
    return editor, extension, fs, seen


# ---------------------------------------------------------------------------
# Watch sync
# ---------------------------------------------------------------------------


@app.cell
def _watch_ticker(mo):
    ticker = mo.ui.refresh(default_interval="1s", label="")
    return (ticker,)


@app.cell
def _watch_sync(ticker, extension, revision, seen):
    """Re-list the sidebar after watcher events.

    The watcher thread only bumps ``extension.tree.generation``; the state
    setter runs here, on the kernel, each time the ticker fires.
    """
    ticker.value  # noqa: B018
    current = extension.tree.generation
    if current != seen["generation"]:
        seen["generation"] = current
        revision[1](lambda v: v + 1)
    return


# ---------------------------------------------------------------------------
# Command bar: add / search
# ---------------------------------------------------------------------------


@app.cell
def _command_bar(mo, editor, extension, revision):
    from scratchpad.extension import ADD, SEARCH

    revision[0]  # noqa: B018
    set_revision = revision[1]
    names = [n.name for n in extension.tree.get_children()]

    title_input = mo.ui.text(placeholder="Enter note name", label="", full_width=True)
    search_choice = mo.ui.dropdown(options=names, label="Notes Search")

    def _add(_):
        editor.pending_input = title_input.value.strip() or None
        extension.commands.execute(ADD)
        set_revision(lambda v: v + 1)

    def _search(_):
        editor.pending_choice = search_choice.value
        extension.commands.execute(SEARCH)

    add_btn = mo.ui.button(label="Add note", on_click=_add)
    search_btn = mo.ui.button(label="Open", on_click=_search)

    cmd_bar = mo.hstack(
        [title_input, add_btn, search_choice, search_btn],
        gap="8px",
        align="center",
    )
    return (cmd_bar,)


# ---------------------------------------------------------------------------
# Sidebar tree
# ---------------------------------------------------------------------------


@app.cell
def _sidebar(mo, extension, revision, selected_name):
    from scratchpad.extension import OPEN, REMOVE

    revision[0]  # noqa: B018  re-list whenever a command bumps the revision
    set_revision = revision[1]
    set_selected = selected_name[1]
    provider = extension.tree
    notes = provider.get_children()

    def _select_and_open(note):
        extension.on_selection_change([note])
        set_selected(note.name)
        extension.commands.execute(OPEN)

    def _remove(_):
        extension.commands.execute(REMOVE)
        set_selected("")
        set_revision(lambda v: v + 1)

    def _make_item(note):
        item = provider.get_tree_item(note)
        return mo.ui.button(
            label=item.label,
            on_click=lambda _, n=note: _select_and_open(n),
            kind="ghost",
            full_width=True,
        )

    sidebar = mo.vstack(
        [
            mo.md("## Notes"),
            mo.ui.button(label="Remove selected", on_click=_remove, kind="danger"),
            mo.divider(),
            *[_make_item(n) for n in notes],
        ]
        if notes
        else [mo.md("## Notes"), mo.md("_No notes yet._")],
        gap="4px",
    )
    return (sidebar,)


# ---------------------------------------------------------------------------
# Editor pane
# ---------------------------------------------------------------------------


@app.cell
def _editor_pane(mo, fs, message, open_path):
    from pathlib import Path

    path = open_path[0]
    text, is_error = message[0]

    banner = (
        mo.callout(mo.md(text), kind="danger" if is_error else "info") if text else mo.md("")
    )

    if not path or not Path(path).exists():
        body = mo.md("_Select a note from the sidebar or create one above._")
    else:
        area = mo.ui.text_area(value=fs.read(Path(path)), full_width=True, rows=24)
        save_btn = mo.ui.button(
            label="Save",
            on_click=lambda _: fs.write(Path(path), area.value),
        )
        body = mo.vstack([mo.md(f"### {Path(path).name}"), area, save_btn])

    editor_pane = mo.vstack([banner, body])
    return (editor_pane,)


# ---------------------------------------------------------------------------
# Main layout
# ---------------------------------------------------------------------------


@app.cell
def _main_layout(mo, cmd_bar, sidebar, editor_pane, ticker):
    layout = mo.vstack(
        [
            mo.hstack([cmd_bar, ticker], justify="space-between", align="center"),
            mo.hstack(
                [
                    mo.vstack(
                        [sidebar],
                        style={"width": "220px", "min-width": "180px", "padding": "8px"},
                    ),
                    mo.vstack([editor_pane], style={"flex": "1", "padding": "8px"}),
                ],
                align="start",
                gap="0",
            ),
        ],
        gap="4px",
    )
    return (layout,)


@app.cell
def _render(layout):
    layout  # noqa: B018  marimo displays the last expression as cell output
    return


@app.cell
def _():
    import marimo as mo

    return (mo,)


if __name__ == "__main__":
    app.run()
