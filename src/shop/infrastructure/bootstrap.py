"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  ``Services`` is built
once per process (CLI invocation or API app) from explicit settings.
"""

from __future__ import annotations

from datetime import timedelta

from shop.application.add_product import AddProductHandler
from shop.application.add_to_cart import AddToCartHandler
from shop.application.delete_product import DeleteProductHandler
from shop.application.list_products import ListProductsHandler
from shop.application.login_user import LoginHandler
from shop.application.place_order import PlaceOrderHandler
from shop.application.register_user import RegisterUserHandler
from shop.application.remove_from_cart import RemoveFromCartHandler
from shop.application.report_summary import ReportSummaryHandler
from shop.application.show_cart import ShowCartHandler
from shop.application.show_product import ShowProductHandler
from shop.application.update_product import UpdateProductHandler
from shop.config import Settings
from shop.infrastructure.auth.jwt_tokens import JwtTokenCodec
from shop.infrastructure.auth.passwords import Pbkdf2PasswordHasher
from shop.infrastructure.persistence.storage import Storage


def token_codec(settings: Settings) -> JwtTokenCodec:
    return JwtTokenCodec(
        secret=settings.require_jwt_secret(),
        ttl=timedelta(days=settings.token_ttl_days),
    )


class Services:

    def __init__(self, settings: Settings, storage: Storage) -> None:
        self.settings = settings
        self.storage = storage

    @staticmethod
    def open(settings: Settings) -> Services:
        return Services(settings, Storage(settings.data_dir).open())

    def close(self) -> None:
        self.storage.close()

    def __enter__(self) -> Services:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # --- Catalog --------------------------------------------------------------

    def add_product(self) -> AddProductHandler:
        return AddProductHandler(self.storage.products)

    def update_product(self) -> UpdateProductHandler:
        return UpdateProductHandler(self.storage.products)

    def delete_product(self) -> DeleteProductHandler:
        return DeleteProductHandler(self.storage.products)

    def show_product(self) -> ShowProductHandler:
        return ShowProductHandler(self.storage.products)

    def list_products(self) -> ListProductsHandler:
        return ListProductsHandler(self.storage.products)

    # --- Cart -----------------------------------------------------------------

    def add_to_cart(self) -> AddToCartHandler:
        return AddToCartHandler(self.storage.carts, self.storage.products)

    def remove_from_cart(self) -> RemoveFromCartHandler:
        return RemoveFromCartHandler(self.storage.carts, self.storage.products)

    def show_cart(self) -> ShowCartHandler:
        return ShowCartHandler(self.storage.carts, self.storage.products)

    # --- Orders & reports -----------------------------------------------------

    def place_order(self) -> PlaceOrderHandler:
        return PlaceOrderHandler(
            self.storage.orders, self.storage.carts, self.storage.products
        )

    def report_summary(self) -> ReportSummaryHandler:
        return ReportSummaryHandler(self.storage.orders)

    # --- Accounts -------------------------------------------------------------

    def register_user(self) -> RegisterUserHandler:
        return RegisterUserHandler(self.storage.users, self._password_hasher())

    def login(self) -> LoginHandler:
        return LoginHandler(
            self.storage.users, self._password_hasher(), token_codec(self.settings)
        )

    def _password_hasher(self) -> Pbkdf2PasswordHasher:
        return Pbkdf2PasswordHasher(self.settings.password_iterations)
