"""Request-to-entity mapping."""

from __future__ import annotations

from subsctl.domain.lifecycle import INITIAL_STATUS
from subsctl.domain.subscription import CreateSubscriptionRequest, Subscription
from subsctl.domain.types import Provider


class CreateSubscriptionMapper:
    """Builds a new, unsaved :class:`Subscription` from a validated request."""

    def map(self, request: CreateSubscriptionRequest) -> Subscription:
        """Map *request* to an ACTIVE subscription with no id.

        Raises:
            ValueError: If the provider text is not a known provider. Run
                the validator first to rule this out.
        """
        provider = Provider.parse(request.provider)
        if provider is None:
            msg = f"Unknown provider: {request.provider!r}"
            raise ValueError(msg)

        return Subscription(
            user_id=request.user_id,
            name=request.name,
            provider=provider,
            expiration_date=request.expiration_date,
            status=INITIAL_STATUS,
        )
