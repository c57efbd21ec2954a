"""
Interactive Menu.

The menu is a finite-state machine. MENUS holds, per state, the numbered
options and where each one leads; MenuLoop reads a choice through the
console boundary and applies one transition per step().

States:
    UNAUTHENTICATED  - prompts for credentials until the backend accepts them
    MAIN_MENU        - 1 users, 2 products, 0 exit
    USER_MENU        - user actions
    PRODUCT_MENU     - product actions
    EXIT             - terminal

A sub-menu action runs once and control returns to MAIN_MENU. Anything
that is not one of the listed numbers leaves the state unchanged.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum

import httpx

from productdesk.cli.commands import auth, products, users
from productdesk.cli.console import ConsoleIO, parse_choice
from productdesk.cli.context import CLIContext, create_context
from productdesk.core.exceptions import InputParseError
from productdesk.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

CHOICE_PROMPT = "Enter your choice: "
INVALID_CHOICE = "Invalid choice! Please try again."


class MenuState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    MAIN_MENU = "main_menu"
    USER_MENU = "user_menu"
    PRODUCT_MENU = "product_menu"
    EXIT = "exit"


Handler = Callable[[CLIContext], Awaitable[bool]]


@dataclass(frozen=True)
class MenuOption:
    """
    One numbered entry.

    Either navigates to target (printing message, if any) or runs handler
    and then returns to the main menu.
    """

    choice: int
    label: str
    target: MenuState | None = None
    handler: Handler | None = None
    message: str | None = None


@dataclass(frozen=True)
class Menu:
    title: str
    options: tuple[MenuOption, ...]

    def option(self, choice: int) -> MenuOption | None:
        for option in self.options:
            if option.choice == choice:
                return option
        return None


MENUS: dict[MenuState, Menu] = {
    MenuState.MAIN_MENU: Menu(
        "Main Menu:",
        (
            MenuOption(1, "Manage Users", target=MenuState.USER_MENU),
            MenuOption(2, "Manage Products", target=MenuState.PRODUCT_MENU),
            MenuOption(0, "Exit", target=MenuState.EXIT, message="Goodbye!"),
        ),
    ),
    MenuState.USER_MENU: Menu(
        "=== Manage Users ===",
        (
            MenuOption(1, "Create User", handler=users.prompt_create_user),
            MenuOption(2, "Display All Users", handler=users.display_users),
            MenuOption(
                0, "Back to Main Menu",
                target=MenuState.MAIN_MENU, message="Returning to Main Menu...",
            ),
        ),
    ),
    MenuState.PRODUCT_MENU: Menu(
        "=== Manage Products ===",
        (
            MenuOption(1, "Display All Products", handler=products.display_products),
            MenuOption(2, "Fetch Product by ID", handler=products.prompt_fetch_product_by_id),
            MenuOption(3, "Add Product", handler=products.prompt_add_product),
            MenuOption(4, "Update Product", handler=products.prompt_update_product),
            MenuOption(5, "Delete Product", handler=products.prompt_delete_product),
            MenuOption(6, "View 3 Most Expensive Products", handler=products.view_top_expensive_products),
            MenuOption(
                0, "Back to Main Menu",
                target=MenuState.MAIN_MENU, message="Returning to Main Menu...",
            ),
        ),
    ),
}


def next_state(state: MenuState, choice: int | None) -> MenuState:
    """Where a choice leads from a menu state, ignoring handler side effects."""
    menu = MENUS.get(state)
    option = menu.option(choice) if menu is not None and choice is not None else None
    if option is None:
        return state
    if option.target is not None:
        return option.target
    return MenuState.MAIN_MENU


class MenuLoop:
    """
    Drives the menu state machine over a CLIContext.

    Usage:
        loop = MenuLoop(ctx)
        await loop.run()
    """

    def __init__(self, ctx: CLIContext) -> None:
        self.ctx = ctx
        self.state = MenuState.UNAUTHENTICATED

    @property
    def io(self) -> ConsoleIO:
        return self.ctx.io

    async def run(self) -> None:
        """Run until EXIT. End of input exits as if 0 was chosen at the main menu."""
        self.io.write("=== Welcome to the Backend CLI ===", style="bold")

        while self.state is not MenuState.EXIT:
            try:
                await self.step()
            except EOFError:
                self.io.write()
                self.io.write("Goodbye!")
                self._move(MenuState.EXIT)

    async def step(self) -> MenuState:
        """Apply one transition and return the new state."""
        if self.state is MenuState.EXIT:
            return self.state

        if self.state is MenuState.UNAUTHENTICATED:
            if await auth.prompt_login(self.ctx):
                self._move(MenuState.MAIN_MENU)
            return self.state

        menu = MENUS[self.state]
        self._display(menu)
        choice = parse_choice(self.io.read(CHOICE_PROMPT))
        option = menu.option(choice.value) if choice.is_valid else None

        if option is None:
            self.io.write(INVALID_CHOICE, style="red")
            log_with_source(
                logger, "menu", "debug", "Invalid choice", state=self.state.value, raw=choice.raw,
            )
            return self.state

        if option.handler is not None:
            try:
                await option.handler(self.ctx)
            except InputParseError as e:
                self.io.write(e.message, style="red")
        elif option.message:
            self.io.write(option.message)

        self._move(next_state(self.state, option.choice))
        return self.state

    def _display(self, menu: Menu) -> None:
        self.io.write()
        self.io.write(menu.title, style="bold")
        for option in menu.options:
            self.io.write(f"{option.choice}. {option.label}")

    def _move(self, state: MenuState) -> None:
        if state is not self.state:
            log_with_source(
                logger, "menu", "debug", "Menu transition",
                from_state=self.state.value, to_state=state.value,
            )
        self.state = state


async def run_shell(
    base_url: str | None = None,
    io: ConsoleIO | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    """Run the interactive menu against the configured backend."""
    ctx = create_context(base_url=base_url, io=io, transport=transport)
    async with ctx.client:
        await MenuLoop(ctx).run()
