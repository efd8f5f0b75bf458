from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

PlanType = Literal["monthly", "yearly"]


class SubscriptionPlan(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: PlanType
    price_id: str = Field(alias="priceId")
    name: str
    amount: float
    currency: str
    interval: Literal["month", "year"]
    features: List[str] = Field(default_factory=list)


class PlansResponse(BaseModel):
    model_config = ConfigDict(extra="allow")
    success: bool
    plans: List[SubscriptionPlan] = Field(default_factory=list)


class Subscription(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: str
    status: str
    plan_type: Optional[PlanType] = Field(default=None, alias="planType")
    current_period_end: Optional[datetime] = Field(default=None, alias="currentPeriodEnd")
    current_period_start: Optional[datetime] = Field(
        default=None, alias="currentPeriodStart"
    )
    cancel_at_period_end: bool = Field(default=False, alias="cancelAtPeriodEnd")
    canceled_at: Optional[datetime] = Field(default=None, alias="canceledAt")
    amount: Optional[float] = None
    currency: Optional[str] = None


class SubscriptionResponse(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    success: bool
    is_pro: bool = Field(alias="isPro")
    subscription: Optional[Subscription] = None


class PaymentSheetPlan(BaseModel):
    model_config = ConfigDict(extra="allow")
    type: PlanType
    name: str
    amount: float
    interval: str


class PaymentSheetResponse(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    success: bool
    subscription_id: str = Field(alias="subscriptionId")
    client_secret: str = Field(alias="clientSecret")
    customer_id: Optional[str] = Field(default=None, alias="customerId")
    ephemeral_key: Optional[str] = Field(default=None, alias="ephemeralKey")
    plan: Optional[PaymentSheetPlan] = None

    def __repr__(self) -> str:
        return (
            f"PaymentSheetResponse(success={self.success!r}, "
            f"subscription_id={self.subscription_id!r}, client_secret='***')"
        )


class CanceledSubscription(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: str
    status: str
    cancel_at_period_end: bool = Field(default=False, alias="cancelAtPeriodEnd")
    current_period_end: Optional[datetime] = Field(default=None, alias="currentPeriodEnd")


class CancelSubscriptionResponse(BaseModel):
    model_config = ConfigDict(extra="allow")
    success: bool
    subscription: CanceledSubscription
