"""
Configuration Models

Pydantic models for type-safe configuration management with validation,
defaults and field documentation.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cardfilter.cards import Card, sample_cards


class CardConfig(BaseModel):
    """A card definition."""

    model_config = ConfigDict(extra='forbid')

    id: int = Field(description="Card identifier")
    name: str = Field(description="Display name")
    cost: float = Field(description="Card cost")
    version: int = Field(description="Card version")
    leader_id: int = Field(default=0, description="Category (leader) identifier")

    def to_card(self) -> Card:
        return Card.from_dict(self.model_dump())


class FilterConfig(BaseModel):
    """Configuration for the composed card filter."""

    model_config = ConfigDict(extra='forbid')

    # Cost Filter (exclusive bounds)
    min_cost: float = Field(
        default=0.0,
        description="Exclusive lower cost bound"
    )
    max_cost: Optional[float] = Field(
        default=None,
        description="Exclusive upper cost bound (unbounded when unset)"
    )

    # Membership Filters
    versions: Optional[List[int]] = Field(
        default=None,
        description="Accepted card versions (version filter disabled when unset)"
    )
    leaders: Optional[List[int]] = Field(
        default=None,
        description="Accepted leader ids (leader filter disabled when unset)"
    )

    @field_validator('versions', 'leaders', mode='before')
    @classmethod
    def split_comma_list(cls, v):
        """Accept comma-separated strings such as ``"1,3"``."""
        if isinstance(v, str):
            return [item.strip() for item in v.split(',') if item.strip()]
        return v


def _default_cards() -> List[CardConfig]:
    return [CardConfig(**card.to_dict()) for card in sample_cards()]


class AppConfig(BaseModel):
    """Main application configuration."""

    model_config = ConfigDict(extra='forbid')

    cards: List[CardConfig] = Field(
        default_factory=_default_cards,
        description="Cards to filter (defaults to the sample dataset)"
    )
    filters: FilterConfig = Field(default_factory=FilterConfig, description="Filter configuration")

    verbose: bool = Field(
        default=False,
        description="Enable verbose logging output"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode with detailed logging"
    )

    def build_cards(self) -> List[Card]:
        """Materialize the configured cards."""
        return [card.to_card() for card in self.cards]
