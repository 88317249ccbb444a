"""Purchase step: tier selection, simulated payment and download."""

import asyncio
import logging
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from typing import ClassVar, Protocol

from animal_portrait.domain.catalog import (
    DEFAULT_TIER_ID,
    PRICING_TIERS,
    PricingTier,
    find_tier,
)
from animal_portrait.domain.wizard import UserData, WizardStep
from animal_portrait.services.errors import StepActionError, StoreWriteError
from animal_portrait.services.wizard import StepCallbacks

logger = logging.getLogger(__name__)


class PurchaseRepository(Protocol):
    """Persistence interface for purchases."""

    def create_purchase(
        self, user_id: str | None, tier: str, price: float, status: str
    ) -> None:
        """Insert a purchase row."""


@dataclass(frozen=True)
class DownloadLink:
    """Client-side download of an image that is already available."""

    url: str
    filename: str


@dataclass(eq=False)
class PurchaseStep:
    """Package selection and checkout state."""

    step: ClassVar[WizardStep] = WizardStep.PURCHASE

    user: UserData
    generated_image_url: str
    callbacks: StepCallbacks
    repository: PurchaseRepository
    payment_delay_seconds: float = 2.0
    selected_tier_id: str = DEFAULT_TIER_ID
    is_purchasing: bool = False
    purchase_complete: bool = False
    error: str = ""

    @property
    def selected_tier(self) -> PricingTier:
        tier = find_tier(self.selected_tier_id)
        if tier is None:
            raise StepActionError(f"Unknown pricing tier: {self.selected_tier_id}")
        return tier

    @property
    def total(self) -> float:
        """Amount charged for the selected tier."""
        return self.selected_tier.price

    def select_tier(self, tier_id: str) -> None:
        if self.purchase_complete or self.is_purchasing:
            raise StepActionError("The package can no longer be changed.")
        if find_tier(tier_id) is None:
            raise StepActionError(f"Unknown pricing tier: {tier_id}")
        self.selected_tier_id = tier_id

    async def purchase(self) -> bool:
        """Simulate payment and record the purchase."""
        if self.purchase_complete:
            raise StepActionError("This photo has already been purchased.")
        if self.is_purchasing:
            raise StepActionError("A purchase is already in progress.")
        tier = self.selected_tier
        self.is_purchasing = True
        self.error = ""
        try:
            await asyncio.sleep(self.payment_delay_seconds)
            self.repository.create_purchase(
                user_id=self.user.user_id,
                tier=tier.id,
                price=tier.price,
                status="completed",
            )
        except StoreWriteError as exc:
            logger.exception(
                "Purchase failed",
                extra={"user_id": self.user.user_id, "tier": tier.id},
            )
            self.error = exc.message
            return False
        finally:
            self.is_purchasing = False
        self.purchase_complete = True
        logger.info(
            "Purchase completed", extra={"user_id": self.user.user_id, "tier": tier.id}
        )
        return True

    def download(self, now: datetime | None = None) -> DownloadLink:
        """Return a download link for the purchased image."""
        if not self.purchase_complete:
            raise StepActionError("Complete the purchase to download your photo.")
        moment = now or datetime.now(tz=UTC)
        timestamp_ms = int(moment.timestamp() * 1000)
        return DownloadLink(
            url=self.generated_image_url,
            filename=f"animal-portrait-{timestamp_ms}.jpg",
        )

    def start_over(self) -> None:
        """Finish the wizard and go back to sign-up."""
        if not self.purchase_complete:
            raise StepActionError("Complete the purchase before starting over.")
        self.callbacks.on_complete({})

    def snapshot(self) -> dict[str, object]:
        tier = self.selected_tier
        return {
            "generated_image_url": self.generated_image_url,
            "email": self.user.email,
            "tiers": [asdict(entry) for entry in PRICING_TIERS],
            "selected_tier": tier.id,
            "total": self.total,
            "purchase_label": f"Purchase {tier.name} - ${tier.price:.2f}",
            "is_purchasing": self.is_purchasing,
            "purchase_complete": self.purchase_complete,
            "error": self.error,
        }

    def dispose(self) -> None:
        return None
