# rest_api/app.py
from decimal import Decimal
from typing import Dict, List, Literal, Optional, Any
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Header, Query, Request
from pydantic import BaseModel, Field, field_validator

from onepage.app.controller import AppController
from onepage.app.settings import CheckoutSettings
from onepage.domain.entities import (
    Address,
    Customer,
    FulfillmentGroup,
    FulfillmentOption,
    Order,
    OrderPayment,
)
from onepage.domain.sections import HelpMessages
from onepage.utils.logging import apply_debug_setting, configure_root
from onepage.viewmodels.checkout_vm import CheckoutForms, CheckoutRequest
from onepage.viewmodels.view_json import forms_to_json, model_to_json

CONTROLLER: Optional[AppController] = None


def get_controller() -> AppController:
    global CONTROLLER
    if CONTROLLER is None:
        CONTROLLER = AppController(CheckoutSettings.from_env())
    return CONTROLLER


# ---------- Cart snapshot models ----------
class AddressIn(BaseModel):
    id: Optional[str] = None
    first_name: str = ""
    last_name: str = ""
    address_line1: str = ""
    address_line2: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = ""
    phone: str = ""

    def to_domain(self) -> Address:
        return Address(**self.model_dump())


class FulfillmentOptionIn(BaseModel):
    id: str = Field(..., min_length=1)
    name: str = ""
    description: str = ""

    @field_validator("id")
    @classmethod
    def _id_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("fulfillment option id must not be blank")
        return value.strip()

    def to_domain(self) -> FulfillmentOption:
        return FulfillmentOption(id=self.id, name=self.name, description=self.description)


class FulfillmentGroupIn(BaseModel):
    id: str
    type: Optional[
        Literal["PHYSICAL_SHIP", "PHYSICAL_PICKUP", "PHYSICAL_PICKUP_OR_SHIP", "DIGITAL", "GIFT_CARD"]
    ] = None
    address: Optional[AddressIn] = None
    fulfillment_option: Optional[FulfillmentOptionIn] = None

    def to_domain(self) -> FulfillmentGroup:
        return FulfillmentGroup(
            id=self.id,
            type=self.type,
            address=self.address.to_domain() if self.address else None,
            fulfillment_option=self.fulfillment_option.to_domain() if self.fulfillment_option else None,
        )


class PaymentIn(BaseModel):
    id: str
    type: Literal["CREDIT_CARD", "THIRD_PARTY_ACCOUNT", "GIFT_CARD", "CUSTOMER_CREDIT"]
    active: bool = True
    gateway_type: Optional[str] = None
    amount: Optional[Decimal] = None
    billing_address: Optional[AddressIn] = None

    def to_domain(self) -> OrderPayment:
        return OrderPayment(
            id=self.id,
            type=self.type,
            active=self.active,
            gateway_type=self.gateway_type,
            amount=self.amount,
            billing_address=self.billing_address.to_domain() if self.billing_address else None,
        )


class CartIn(BaseModel):
    id: Optional[str] = None
    email_address: Optional[str] = None
    fulfillment_groups: List[FulfillmentGroupIn] = Field(default_factory=list)
    payments: List[PaymentIn] = Field(default_factory=list)
    total: Optional[Decimal] = None
    currency: str = "USD"

    def to_domain(self) -> Order:
        return Order(
            id=self.id,
            email_address=self.email_address,
            fulfillment_groups=tuple(group.to_domain() for group in self.fulfillment_groups),
            payments=tuple(payment.to_domain() for payment in self.payments),
            total=self.total,
            currency=self.currency,
        )


class HelpMessagesIn(BaseModel):
    order_info: Optional[str] = None
    billing_info: Optional[str] = None
    shipping_info: Optional[str] = None


class CheckoutViewRequest(BaseModel):
    cart: Optional[CartIn] = Field(None, description="Session cart; omitted when the shopper has none")
    customer_id: Optional[str] = None
    help_messages: HelpMessagesIn = Field(default_factory=HelpMessagesIn)


class CheckoutViewResponse(BaseModel):
    model: Dict[str, Any]
    forms: Dict[str, Any]


# ---------- Startup ----------
@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_root()
    controller = get_controller()
    apply_debug_setting(controller.settings.debug_logging)
    yield


app = FastAPI(title="One Page Checkout API", version="0.1.0", lifespan=lifespan)


# ---------- Auth Helper ----------
def require_key(x_api_key: Optional[str]):
    api_key = get_controller().settings.api_key
    if api_key and x_api_key != api_key:
        raise HTTPException(401, "Unauthorized")


@app.get("/health")
def health(x_api_key: Optional[str] = Header(None)):
    require_key(x_api_key)
    return {"ok": True}


@app.post("/checkout/view-state", response_model=CheckoutViewResponse)
def checkout_view_state(
    body: CheckoutViewRequest,
    request: Request,
    locale: Optional[str] = Query(None),
    x_api_key: Optional[str] = Header(None),
):
    """Render the checkout view variables and pre-filled forms for a cart snapshot.

    Query parameters ``edit-order-info``, ``edit-billing``, ``edit-shipping``
    and ``paymentProcessingError`` are read as the page would receive them.
    """
    require_key(x_api_key)
    controller = get_controller()

    customer = Customer(id=body.customer_id, anonymous=False) if body.customer_id else None
    checkout_request = CheckoutRequest.from_params(
        dict(request.query_params),
        cart=body.cart.to_domain() if body.cart else None,
        customer=customer,
        help_messages=HelpMessages(**body.help_messages.model_dump()),
        locale=locale or controller.settings.default_locale or None,
    )
    forms = CheckoutForms()
    model = controller.checkout_vm().build(checkout_request, forms)
    return {"model": model_to_json(model), "forms": forms_to_json(forms)}
