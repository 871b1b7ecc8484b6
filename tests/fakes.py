"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON and Supabase
adapters but keep everything in dicts. No file I/O, no network.
"""

from __future__ import annotations

from collections.abc import Callable

from storefront.application.notifier import Notifier
from storefront.domain.exceptions import AuthenticationError, CollaboratorError
from storefront.domain.model.cake_request import CakeRequest
from storefront.domain.model.cart import CartLine
from storefront.domain.model.order import CheckoutRequest, Order
from storefront.domain.model.product import Product
from storefront.domain.model.profile import Profile
from storefront.domain.model.session import Session
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.bot_verifier import BotVerifier
from storefront.domain.repository.cake_request_repository import (
    CakeRequestRepository,
)
from storefront.domain.repository.catalog_provider import CatalogProvider
from storefront.domain.repository.identity_provider import (
    IdentityProvider,
    SessionCallback,
)
from storefront.domain.repository.local_cart_storage import LocalCartStorage
from storefront.domain.repository.order_services import (
    OrderLookupService,
    OrderSubmissionService,
)
from storefront.domain.repository.profile_repository import ProfileRepository
from storefront.domain.repository.remote_cart_repository import (
    RemoteCartRepository,
)


class FakeLocalCartStorage(LocalCartStorage):

    def __init__(self, lines: list[CartLine] | None = None, fail_writes: bool = False) -> None:
        self.saved: list[CartLine] = list(lines or [])
        self.fail_writes = fail_writes
        self.writes = 0

    def load(self) -> list[CartLine]:
        return list(self.saved)

    def save(self, lines: list[CartLine]) -> None:
        if self.fail_writes:
            raise OSError("disk full")
        self.writes += 1
        self.saved = list(lines)


class FakeRemoteCartRepository(RemoteCartRepository):
    """Remote cart keyed by (user_id, product_id).

    ``fail_on`` names operations that should raise CollaboratorError.
    """

    def __init__(self, rows: dict[tuple[str, int], int] | None = None) -> None:
        self.rows: dict[tuple[str, int], int] = dict(rows or {})
        self.fail_on: set[str] = set()
        self.calls: list[str] = []

    def _call(self, op: str) -> None:
        self.calls.append(op)
        if op in self.fail_on:
            raise CollaboratorError(f"Could not {op}: backend unavailable")

    def upsert_many(self, user_id: str, lines: list[CartLine]) -> None:
        self._call("upsert_many")
        for line in lines:
            self.rows[(user_id, line.product_id)] = line.qty

    def fetch_all(self, user_id: str) -> list[CartLine]:
        self._call("fetch_all")
        return [
            CartLine(pid, Quantity(qty))
            for (uid, pid), qty in self.rows.items()
            if uid == user_id
        ]

    def get_quantity(self, user_id: str, product_id: int) -> int | None:
        self._call("get_quantity")
        return self.rows.get((user_id, product_id))

    def set_quantity(self, user_id: str, product_id: int, qty: int) -> None:
        self._call("set_quantity")
        if qty <= 0:
            self.rows.pop((user_id, product_id), None)
        else:
            self.rows[(user_id, product_id)] = qty

    def delete_line(self, user_id: str, product_id: int) -> None:
        self._call("delete_line")
        self.rows.pop((user_id, product_id), None)

    def delete_all(self, user_id: str) -> None:
        self._call("delete_all")
        for key in [k for k in self.rows if k[0] == user_id]:
            del self.rows[key]

    def cart_of(self, user_id: str) -> dict[int, int]:
        return {pid: qty for (uid, pid), qty in self.rows.items() if uid == user_id}


class FakeCatalogProvider(CatalogProvider):

    def __init__(self, products: list[Product] | None = None) -> None:
        self.products = list(products or [])
        self.fetches = 0
        self.fail = False

    def list_products(self) -> list[Product]:
        self.fetches += 1
        if self.fail:
            raise CollaboratorError("Failed to load products")
        return list(self.products)


class FakeProfileRepository(ProfileRepository):

    def __init__(self, profiles: list[Profile] | None = None) -> None:
        self._store: dict[str, Profile] = {p.user_id: p for p in profiles or []}
        self.fail = False
        self.uploads: dict[str, bytes] = {}

    def get_profile(self, user_id: str) -> Profile | None:
        if self.fail:
            raise CollaboratorError("Could not load profile")
        return self._store.get(user_id)

    def upsert_profile(self, profile: Profile) -> Profile:
        self._store[profile.user_id] = profile
        return profile

    def upload_avatar(self, user_id: str, filename: str, content: bytes) -> str:
        path = f"{user_id}/{filename}"
        self.uploads[path] = content
        return f"https://cdn.example.test/avatars/{path}"


class FakeIdentityProvider(IdentityProvider):

    def __init__(self, accounts: dict[str, tuple[str, str]] | None = None) -> None:
        # email -> (password, user_id)
        self.accounts = dict(accounts or {})
        self.session: Session | None = None
        self.require_confirmation = False
        self._listeners: list[SessionCallback] = []

    def get_session(self) -> Session | None:
        return self.session

    def on_session_change(self, callback: SessionCallback) -> Callable[[], None]:
        self._listeners.append(callback)
        return lambda: self._listeners.remove(callback)

    def sign_in_with_password(self, email: str, password: str) -> Session:
        account = self.accounts.get(email)
        if account is None or account[0] != password:
            raise AuthenticationError("Incorrect email or password.")
        self._set(Session(user_id=account[1], email=email, access_token="t"), "SIGNED_IN")
        return self.session  # type: ignore[return-value]

    def sign_up(self, email: str, password: str, extra: dict | None = None) -> Session | None:
        user_id = f"user-{len(self.accounts) + 1}"
        self.accounts[email] = (password, user_id)
        if self.require_confirmation:
            return None
        self._set(Session(user_id=user_id, email=email, access_token="t"), "SIGNED_IN")
        return self.session

    def sign_out(self) -> None:
        self._set(None, "SIGNED_OUT")

    def _set(self, session: Session | None, event: str) -> None:
        self.session = session
        for listener in list(self._listeners):
            listener(event, session)


class FakeOrderSubmissionService(OrderSubmissionService):

    def __init__(self, order_token: str | None = "tok-123") -> None:
        self.order_token = order_token
        self.submitted: list[CheckoutRequest] = []
        self.fail = False

    def submit(self, request: CheckoutRequest) -> str | None:
        if self.fail:
            raise CollaboratorError("Failed to place order.")
        self.submitted.append(request)
        return self.order_token


class FakeOrderLookupService(OrderLookupService):

    def __init__(self, orders: list[tuple[str, str, Order]] | None = None) -> None:
        # (order_token, user_id, order)
        self.orders = list(orders or [])

    def get_order_by_token(self, token: str) -> Order | None:
        for order_token, _, order in self.orders:
            if order_token == token:
                return order
        return None

    def list_orders(self, user_id: str, limit: int = 50) -> list[Order]:
        mine = [o for _, uid, o in self.orders if uid == user_id]
        return sorted(mine, key=lambda o: o.created_at, reverse=True)[:limit]


class FakeCakeRequestRepository(CakeRequestRepository):

    def __init__(self) -> None:
        self.created: list[CakeRequest] = []

    def create(self, request: CakeRequest) -> dict:
        self.created.append(request)
        return {"id": len(self.created), **request.to_raw()}


class FakeBotVerifier(BotVerifier):

    def __init__(self, token: str | None = "captcha-ok") -> None:
        self.token = token

    def obtain_token(self) -> str | None:
        return self.token


class RecordingNotifier(Notifier):

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def info(self, message: str) -> None:
        self.messages.append(("info", message))
