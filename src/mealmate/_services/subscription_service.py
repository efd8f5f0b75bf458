from datetime import datetime
from typing import Optional

from .._utils import handle_errors
from ..models import (
    CancelSubscriptionResponse,
    PaymentSheetResponse,
    PlansResponse,
    ServiceError,
    SubscriptionResponse,
)
from ..models.subscription import PlanType
from ._base_service import BaseService


class SubscriptionService(BaseService):
    """Service for premium subscriptions billed through Stripe."""

    async def get_plans(self) -> PlansResponse:
        with handle_errors("Failed to fetch subscription plans"):
            response = await self._api.get("/stripe/plans", require_auth=False)
            return PlansResponse.model_validate(response)

    async def create_subscription(
        self, plan_type: PlanType, payment_method_id: Optional[str] = None
    ) -> PaymentSheetResponse:
        """Start a subscription and get the payment sheet secrets for it.

        Args:
            plan_type (str): ``monthly`` or ``yearly``.
            payment_method_id (Optional[str]): An already attached Stripe payment method.

        Returns:
            PaymentSheetResponse: Subscription ID and client secret for the payment sheet.
        """
        payload = {"planType": plan_type}
        if payment_method_id is not None:
            payload["paymentMethodId"] = payment_method_id

        with handle_errors("Failed to create subscription"):
            response = await self._api.post("/stripe/create-subscription", payload)
            return PaymentSheetResponse.model_validate(response)

    async def get_current_subscription(self) -> SubscriptionResponse:
        with handle_errors("Failed to fetch current subscription"):
            response = await self._api.get("/stripe/subscription")
            return SubscriptionResponse.model_validate(response)

    async def cancel_subscription(self, subscription_id: str) -> CancelSubscriptionResponse:
        with handle_errors("Failed to cancel subscription"):
            response = await self._api.delete(
                f"/stripe/cancel-subscription/{subscription_id}"
            )
            return CancelSubscriptionResponse.model_validate(response)

    async def is_premium_user(self) -> bool:
        """Whether the signed-in user has an active premium subscription.

        Any failure counts as not premium.
        """
        try:
            response = await self.get_current_subscription()
        except ServiceError as e:
            self._logger.warning(f"Failed to check premium status: {e}")
            return False
        return response.is_pro

    async def get_subscription_expiry_date(self) -> Optional[datetime]:
        try:
            response = await self.get_current_subscription()
        except ServiceError as e:
            self._logger.warning(f"Failed to get subscription expiry: {e}")
            return None

        if response.subscription is None:
            return None
        return response.subscription.current_period_end
