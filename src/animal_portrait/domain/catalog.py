"""Fixed catalogs offered by the wizard."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Animal:
    """Animal that can be added to a portrait."""

    id: str
    name: str
    emoji: str
    description: str


@dataclass(frozen=True)
class PricingTier:
    """Purchasable package for a generated portrait."""

    id: str
    name: str
    price: float
    features: tuple[str, ...]
    emoji: str
    popular: bool = False


ANIMALS: tuple[Animal, ...] = (
    Animal("dog", "Dog", "🐕", "Man's best friend"),
    Animal("cat", "Cat", "🐈", "Purr-fect companion"),
    Animal("rabbit", "Rabbit", "🐰", "Fluffy and cute"),
    Animal("hamster", "Hamster", "🐹", "Tiny and adorable"),
    Animal("bird", "Bird", "🦜", "Colorful friend"),
    Animal("fish", "Fish", "🐠", "Swimming buddy"),
    Animal("turtle", "Turtle", "🐢", "Slow and steady"),
    Animal("panda", "Panda", "🐼", "Bamboo lover"),
    Animal("koala", "Koala", "🐨", "Sleepy cutie"),
    Animal("lion", "Lion", "🦁", "King of the jungle"),
    Animal("tiger", "Tiger", "🐯", "Fierce and majestic"),
    Animal("bear", "Bear", "🐻", "Cuddly giant"),
    Animal("fox", "Fox", "🦊", "Clever creature"),
    Animal("wolf", "Wolf", "🐺", "Wild and free"),
    Animal("monkey", "Monkey", "🐵", "Playful primate"),
    Animal("penguin", "Penguin", "🐧", "Formal friend"),
    Animal("owl", "Owl", "🦉", "Wise one"),
    Animal("unicorn", "Unicorn", "🦄", "Magical creature"),
)

PRICING_TIERS: tuple[PricingTier, ...] = (
    PricingTier(
        id="digital",
        name="Digital Download",
        price=9.99,
        features=(
            "High-resolution digital file",
            "Instant download",
            "Perfect for social media",
            "Email delivery",
        ),
        emoji="💾",
    ),
    PricingTier(
        id="print",
        name="Print + Digital",
        price=24.99,
        features=(
            "Everything in Digital",
            "8x10 printed photo",
            "Premium quality paper",
            "Shipped to your door",
        ),
        emoji="🖼️",
        popular=True,
    ),
    PricingTier(
        id="premium",
        name="Premium Package",
        price=49.99,
        features=(
            "Everything in Print",
            "Multiple size options",
            "Framed photo",
            "Express shipping",
        ),
        emoji="⭐",
    ),
)

DEFAULT_TIER_ID = PRICING_TIERS[1].id


def find_animal(animal_id: str) -> Animal | None:
    """Return the catalog animal with the given id, if any."""
    return next((animal for animal in ANIMALS if animal.id == animal_id), None)


def find_tier(tier_id: str) -> PricingTier | None:
    """Return the pricing tier with the given id, if any."""
    return next((tier for tier in PRICING_TIERS if tier.id == tier_id), None)
