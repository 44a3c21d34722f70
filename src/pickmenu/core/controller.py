"""Menu controller: the state machine behind an interactive menu.

The controller owns the current level (title, source, entries), the page
and cursor, and the navigation stack. Each loop iteration blocks on one
key, maps it to a MenuEvent and applies exactly one transition.
"""

from enum import Enum
from typing import Any, Callable, Optional, Union

from pickmenu.core.actions import ActionExecutor, ResultKind, ShellActionExecutor
from pickmenu.core.entries import (
    ActionKind,
    EntrySource,
    MappingSource,
    MenuEntry,
    SequenceSource,
    build_entries,
    to_source,
)
from pickmenu.core.navigation import NavigationStack
from pickmenu.core.pager import PageState, layout
from pickmenu.ui.base import Terminal
from pickmenu.ui.keys import MenuEvent, event_for
from pickmenu.ui.renderer import Renderer
from pickmenu.ui.session import TerminalSession
from pickmenu.utils.config import Config
from pickmenu.utils.debug import debug_menu
from pickmenu.utils.exceptions import (
    InputError,
    InvalidNestedResultError,
    TerminalUnavailableError,
)

# None when cancelled, a name for single-select, names for multi-select
MenuResult = Union[None, str, list[str]]


class MenuState(Enum):
    BROWSING = "browsing"
    AWAITING_ACTION = "awaiting_action"
    EXITED = "exited"


class MenuController:
    """Runs one interactive menu session."""

    def __init__(
        self,
        source: Any,
        terminal: Terminal,
        executor: Optional[ActionExecutor] = None,
        title: Optional[str] = None,
        sort: bool = False,
        multi_select: bool = False,
        ignore_nested: bool = False,
        config: Optional[Config] = None,
    ):
        self.config = config or Config()
        self.terminal = terminal
        self.executor = executor or ShellActionExecutor(self.config.shell)
        self.renderer = Renderer(terminal, self.config)
        self.sort = sort
        self.multi_select = multi_select
        self.ignore_nested = ignore_nested

        self.navigation = NavigationStack()
        self.state = MenuState.BROWSING
        self.result: MenuResult = None
        self.session: Optional[TerminalSession] = None

        self.title: Optional[str] = None
        self.source: Optional[EntrySource] = None
        self.entries: list[MenuEntry] = []
        self.page: Optional[PageState] = None
        self.row = 0
        self._enter_level(*self._build_level(to_source(source), title))

        self._handlers: dict[MenuEvent, Callable[[], None]] = {
            MenuEvent.MOVE_UP: self.move_up,
            MenuEvent.MOVE_DOWN: self.move_down,
            MenuEvent.JUMP_TOP: self.jump_top,
            MenuEvent.JUMP_BOTTOM: self.jump_bottom,
            MenuEvent.PAGE_NEXT: self.page_next,
            MenuEvent.PAGE_PREV: self.page_prev,
            MenuEvent.TOGGLE_SELECT: self.toggle_select,
            MenuEvent.SELECT_ALL: self.select_all,
            MenuEvent.SELECT_NONE: self.select_none,
            MenuEvent.CONFIRM: self.confirm,
            MenuEvent.CANCEL: self.cancel,
            MenuEvent.QUIT: self.quit,
        }

    # -- levels ----------------------------------------------------------

    def _build_level(self, source: EntrySource, title: Optional[str]):
        entries = build_entries(
            source,
            sort=self.sort,
            multi_select=self.multi_select,
            ignore_nested=self.ignore_nested,
            nested_prefix=self.config.nested_prefix,
        )
        page = layout(
            len(entries), self.terminal.get_viewport_height(), has_title=bool(title)
        )
        return source, title, entries, page

    def _enter_level(self, source, title, entries, page):
        self.source = source
        self.title = title
        self.entries = entries
        self.page = page
        self.row = 0
        if self.session is not None:
            self.session.set_title(title)

    @property
    def current_entry(self) -> MenuEntry:
        return self.entries[self.page.global_index(self.row)]

    @property
    def last_row(self) -> int:
        return self.page.rows_on_current_page - 1

    # -- drawing ---------------------------------------------------------

    def redraw(self):
        self.renderer.draw_page(
            self.entries, self.page, self.row, self.multi_select, title=self.title
        )

    def _move_to(self, row: int):
        old_row, self.row = self.row, row
        self.renderer.update_row(
            self.entries, self.page, old_row, row, self.multi_select
        )

    def _change_page(self, page: int, at_end: bool = False):
        self.page.current_page = page
        self.row = self.last_row if at_end else 0
        self.redraw()

    # -- loop ------------------------------------------------------------

    def run(self) -> MenuResult:
        """Run the key loop until the menu exits.

        Raises:
            TerminalUnavailableError: if raw key reads are not possible
        """
        if not self.terminal.is_interactive():
            raise TerminalUnavailableError("pickmenu needs an interactive terminal")

        with TerminalSession(self.terminal, self.config, self.title) as session:
            self.session = session
            try:
                self.redraw()
                while self.state is not MenuState.EXITED:
                    event = event_for(self.terminal.read_key())
                    if event is not None:
                        self.handle(event)
            finally:
                self.session = None

        return self.result

    def handle(self, event: MenuEvent):
        """Apply one event to the state machine."""
        debug_menu(
            "event",
            event=event.value,
            page=self.page.current_page,
            row=self.row,
            depth=self.navigation.depth,
        )
        self._handlers[event]()

    def _exit(self, result: MenuResult):
        self.result = result
        self.state = MenuState.EXITED
        debug_menu("exit", result=result)

    # -- cursor ----------------------------------------------------------

    def move_down(self):
        if self.row < self.last_row:
            self._move_to(self.row + 1)
        elif self.page.current_page < self.page.last_page:
            self._change_page(self.page.current_page + 1)

    def move_up(self):
        if self.row > 0:
            self._move_to(self.row - 1)
        elif self.page.current_page > 0:
            self._change_page(self.page.current_page - 1, at_end=True)

    def jump_top(self):
        if self.row != 0:
            self._move_to(0)
        elif self.page.current_page > 0:
            self._change_page(self.page.current_page - 1, at_end=True)

    def jump_bottom(self):
        if self.row != self.last_row:
            self._move_to(self.last_row)
        elif self.page.current_page < self.page.last_page:
            self._change_page(self.page.current_page + 1)

    def page_next(self):
        if self.page.current_page < self.page.last_page:
            self._change_page(self.page.current_page + 1)

    def page_prev(self):
        if self.page.current_page > 0:
            self._change_page(self.page.current_page - 1)

    # -- selection -------------------------------------------------------

    def toggle_select(self):
        if not self.multi_select:
            return
        entry = self.current_entry
        entry.selected = not entry.selected
        self._move_to(self.row)

    def _select_every(self, selected: bool):
        if not self.multi_select:
            return
        for entry in self.entries:
            entry.selected = selected
        self.redraw()

    def select_all(self):
        self._select_every(True)

    def select_none(self):
        self._select_every(False)

    # -- leaving a level -------------------------------------------------

    def cancel(self):
        frame = self.navigation.pop()
        if frame is None:
            self._exit(None)
            return
        self._enter_level(*self._build_level(frame.source, frame.title))
        self.redraw()

    def quit(self):
        self._exit(None)

    def confirm(self):
        if self.multi_select:
            self._confirm_selection()
            return

        entry = self.current_entry
        if entry.action_kind is ActionKind.OPEN_NESTED:
            self._open_nested(entry)
        elif entry.action_kind is ActionKind.INLINE_EXECUTE:
            self.state = MenuState.AWAITING_ACTION
            self._prepare_inline()
            self.executor.invoke(entry.action)
            self._exit(None)
        else:
            self._exit(entry.display_name)

    def _confirm_selection(self):
        self.state = MenuState.AWAITING_ACTION
        names = []
        prepared = False
        for entry in self.entries:
            if not entry.selected:
                continue
            if entry.action_kind is ActionKind.INLINE_EXECUTE:
                if not prepared:
                    self._prepare_inline()
                    prepared = True
                self.executor.invoke(entry.action)
            else:
                names.append(entry.display_name)
        self._exit(names)

    def _prepare_inline(self):
        """Hand the screen over to an action whose output should stay visible."""
        self.terminal.clear_screen()
        self.terminal.set_cursor_visible(True)
        if self.session is not None:
            self.session.clear_on_exit = False

    # -- nested menus ----------------------------------------------------

    def _resolve_nested(self, action) -> EntrySource:
        if isinstance(action, (SequenceSource, MappingSource)):
            source = action
        else:
            result = self.executor.invoke(action, nested=True)
            if result.kind is not ResultKind.SEQUENCE:
                raise InvalidNestedResultError(
                    f"{action!r} did not produce a list of choices"
                )
            # Blank lines are not choices, as with shell output
            items = [
                item
                for item in result.items
                if not isinstance(item, str) or item.strip()
            ]
            try:
                source = to_source(items)
            except InputError as e:
                raise InvalidNestedResultError(
                    f"{action!r} produced unusable choices: {e}"
                ) from e

        if not source.items:
            raise InvalidNestedResultError(f"Nested menu {action!r} has no entries")
        return source

    def _open_nested(self, entry: MenuEntry):
        self.state = MenuState.AWAITING_ACTION
        child = self._resolve_nested(entry.action)
        level = self._build_level(child, entry.display_name)
        self.navigation.push(self.title, self.source)
        self._enter_level(*level)
        self.state = MenuState.BROWSING
        self.redraw()


def run_menu(
    entries: Any,
    title: Optional[str] = None,
    sort: bool = False,
    multi_select: bool = False,
    ignore_nested: bool = False,
    terminal: Optional[Terminal] = None,
    executor: Optional[ActionExecutor] = None,
    config: Optional[Config] = None,
) -> MenuResult:
    """Show an interactive menu and return what the user picked.

    Args:
        entries: List of names, or mapping of name -> action / nested menu
        title: Optional title drawn above the entries
        sort: Sort entries by name
        multi_select: Allow checking several entries (never opens nested menus)
        ignore_nested: Treat nested values as plain entries
        terminal: Terminal to draw on (defaults to the real console)
        executor: Runs entry actions (defaults to the shell)
        config: Settings (defaults to the user's config)

    Returns:
        None if cancelled at the root, the picked name for single-select,
        or the checked names in entry order for multi-select
    """
    config = config or Config()
    if terminal is None:
        from pickmenu.ui.terminal import RichTerminal

        terminal = RichTerminal(config=config)

    controller = MenuController(
        entries,
        terminal,
        executor=executor,
        title=title,
        sort=sort,
        multi_select=multi_select,
        ignore_nested=ignore_nested,
        config=config,
    )
    return controller.run()
