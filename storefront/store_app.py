"""Main Textual app class."""

from __future__ import annotations

import logging
from typing import Any, Callable

from rich.console import RenderableType
from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.screen import ModalScreen, Screen
from textual.widgets import Header, Static

from storefront.cart import ShoppingCart
from storefront.checkout import CheckoutReceipt, OrderIdMinter, checkout, seed_minter
from storefront.confirm_modal import ConfirmModal
from storefront.data import CATALOG, find_product
from storefront.errors import StoreError
from storefront.inputs import parse_int, parse_menu_choice, parse_yes_no
from storefront.models import Product
from storefront.payment import PaymentMethod, payment_method_for_choice
from storefront.persistence import OrderLog, OrderStore
from storefront.prompt_modal import PromptModal
from storefront.rendering import (
    render_cart,
    render_catalog,
    render_main_menu,
    render_order_history,
    render_payment_menu,
    render_receipt,
)

logger = logging.getLogger(__name__)


class StorefrontApp(App):
    """A Textual app for browsing the catalog, filling the cart and checking out."""

    TITLE = "Online Store"
    SUB_TITLE = "Products / Cart / Orders"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 1fr;
        border: round $primary;
        padding: 1;
    }

    #content-pane {
        width: 3fr;
        border: round $secondary;
        padding: 1;
    }

    #content {
        height: 1fr;
    }

    #status {
        height: 3;
        border: heavy $secondary;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("ctrl+q", "exit_store", "Exit"),
    ]

    def __init__(
        self,
        cart: ShoppingCart | None = None,
        order_store: OrderStore | None = None,
        catalog: tuple[Product, ...] = CATALOG,
        minter: OrderIdMinter | None = None,
    ) -> None:
        super().__init__()
        self.cart = cart if cart is not None else ShoppingCart()
        self.order_store: OrderStore = order_store if order_store is not None else OrderLog()
        self.catalog = catalog
        self.minter = minter or OrderIdMinter()
        self.system_status = ""
        self.last_receipt: CheckoutReceipt | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static(render_main_menu(), id="menu")
            with Vertical(id="content-pane"):
                yield Static(id="content")
        yield Static(id="status")

    def on_mount(self) -> None:
        logger.info("app_mount products=%d", len(self.catalog))
        seed_minter(self.minter, self.order_store)
        self._show_content(Text("Press 1-4 to choose a menu option."))
        self._set_status("Ready")

    def on_key(self, event: Key) -> None:
        if self._modal_open():
            return
        if not event.is_printable or not event.character:
            return

        event.stop()
        self._run_step("menu", self._dispatch_menu, event.character)

    def _dispatch_menu(self, raw: str) -> None:
        choice = parse_menu_choice(raw)
        logger.debug("menu_choice choice=%s", choice)
        if choice == 1:
            self._open_products()
        elif choice == 2:
            self._open_cart()
        elif choice == 3:
            self._show_orders()
        else:
            self.action_exit_store()

    def action_exit_store(self) -> None:
        logger.info("app_exit cart_items=%d", len(self.cart))
        self.exit(0)

    # Products

    def _open_products(self) -> None:
        self._show_content(render_catalog(self.catalog))
        self.push_screen(
            PromptModal(
                "Add to Cart",
                "Enter the ID of the product you want to add to the shopping cart:",
                self._parse_product_id,
            ),
            self._on_product_chosen,
        )

    def _parse_product_id(self, raw: str) -> Product:
        return find_product(self.catalog, parse_int(raw))

    def _on_product_chosen(self, product: Product | None) -> None:
        if product is None:
            self._set_status("Ready")
            return
        self._run_step("add_product", self._add_to_cart, product)

    def _add_to_cart(self, product: Product) -> None:
        self.cart.add_product(product)
        self._set_status("Product added successfully!")
        self.push_screen(ConfirmModal("Do you want to add another product? (Y/N)"), self._on_add_another)

    def _on_add_another(self, answer: str | None) -> None:
        if answer is None:
            return
        try:
            add_more = parse_yes_no(answer)
        except StoreError as exc:
            # Anything but Y/N counts as N.
            self._report_error(exc)
            add_more = False
        if add_more:
            self._run_step("view_products", self._open_products)

    # Cart and checkout

    def _open_cart(self) -> None:
        self._show_content(render_cart(self.cart))
        if self.cart.is_empty():
            self._set_status("Your shopping cart is empty.")
            return
        self.push_screen(ConfirmModal("Do you want to check out all the products? (Y/N)"), self._on_checkout_answer)

    def _on_checkout_answer(self, answer: str | None) -> None:
        if answer is None:
            return
        try:
            confirmed = parse_yes_no(answer)
        except StoreError as exc:
            self._report_error(exc)
            return
        if not confirmed:
            self._set_status("Ready")
            return
        self.push_screen(
            PromptModal("Payment", render_payment_menu(), self._parse_payment_choice),
            self._on_payment_chosen,
        )

    def _parse_payment_choice(self, raw: str) -> PaymentMethod:
        return payment_method_for_choice(parse_int(raw))

    def _on_payment_chosen(self, method: PaymentMethod | None) -> None:
        if method is None:
            self._set_status("Checkout cancelled")
            return
        self._run_step("checkout", self._checkout, method)

    def _checkout(self, method: PaymentMethod) -> None:
        receipt = checkout(self.cart, method, self.order_store, self.minter)
        self.last_receipt = receipt
        self._show_content(render_receipt(receipt))
        self._set_status(f"Saved order {receipt.order_id}")

    # Orders

    def _show_orders(self) -> None:
        self._show_content(Text(""))
        orders = self.order_store.read_orders()
        self._show_content(render_order_history(orders))
        self._set_status(f"{len(orders)} order(s) on record")

    # Helpers

    def _modal_open(self) -> bool:
        return isinstance(self.screen, ModalScreen)

    def _main_screen(self) -> Screen:
        """The screen holding the menu, content and status widgets, under any open modal."""
        return self.screen_stack[0]

    def _run_step(self, step: str, action: Callable[..., None], *args: Any) -> None:
        """Run one workflow step; failures are reported and the session carries on."""
        try:
            action(*args)
        except StoreError as exc:
            self._report_error(exc)
        except Exception:
            logger.exception("step_failed step=%s", step)
            self._set_status("Error: unexpected failure, see the debug log.", error=True)

    def _report_error(self, exc: StoreError) -> None:
        logger.info("store_error kind=%s context=%r", exc.kind.name, exc.context)
        self._set_status(f"Error: {exc.message}", error=True)

    def _show_content(self, renderable: RenderableType) -> None:
        try:
            self._main_screen().query_one("#content", Static).update(renderable)
        except NoMatches:
            return

    def _set_status(self, message: str, error: bool = False) -> None:
        self.system_status = message
        try:
            status = self._main_screen().query_one("#status", Static)
        except NoMatches:
            return
        status.update(Text(message, style="bold #ffb3b3" if error else ""))
