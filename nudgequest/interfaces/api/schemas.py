"""
Pydantic schemas for API requests and responses.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

# ============ Auth Schemas ============


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)
    username: str = Field(min_length=3, max_length=20)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


# ============ User Schemas ============


class UserResponse(BaseModel):
    """Own user profile response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    username: str
    avatar: str | None = None
    bio: str | None = None
    interests: list[str] = []

    # Gamification
    xp: int
    level: int
    xp_to_next_level: int = 0
    coins: int
    gems: int
    streak: int

    # Subscription
    is_premium: bool
    premium_expires_at: datetime | None = None

    # Discovery
    location_enabled: bool
    discovery_enabled: bool
    discovery_radius: int

    # Power-ups
    xp_boost_until: datetime | None = None
    coin_boost_until: datetime | None = None
    streak_shield_until: datetime | None = None

    badges: list[str] = []


class AuthResponse(BaseModel):
    token: str
    user: UserResponse


class ProfileResponse(BaseModel):
    """Public-facing part of the profile."""

    model_config = ConfigDict(from_attributes=True)

    username: str
    avatar: str | None = None
    bio: str | None = None
    interests: list[str] = []
    location_enabled: bool
    discovery_enabled: bool
    discovery_radius: int


class ProfileUpdateRequest(BaseModel):
    """Partial profile update; omitted fields are left unchanged."""

    username: str | None = Field(default=None, min_length=3, max_length=20)
    avatar: str | None = Field(default=None, max_length=500)
    bio: str | None = Field(default=None, max_length=500)
    interests: list[str] | None = Field(default=None, max_length=20)
    location_enabled: bool | None = None
    discovery_enabled: bool | None = None
    discovery_radius: int | None = Field(default=None, ge=1, le=500)


class UserSummary(BaseModel):
    """Another user, as shown in friend and match lists."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    avatar: str | None = None
    level: int
    xp: int
    streak: int


# ============ Reward Schemas ============


class RewardResponse(BaseModel):
    """Wallet after a reward."""

    model_config = ConfigDict(from_attributes=True)

    xp: int
    coins: int
    level: int
    xp_earned: int
    coins_earned: int
    leveled_up: bool
    level_bonus: int


# ============ Quest Schemas ============


class QuestResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None = None
    category: str
    difficulty: str
    xp_reward: int
    coin_reward: int
    is_active: bool


class QuestsListResponse(BaseModel):
    quests: list[QuestResponse]


class UserQuestResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    status: str
    progress: int
    started_at: datetime
    completed_at: datetime | None = None
    quest: QuestResponse


class ActiveQuestsResponse(BaseModel):
    quests: list[UserQuestResponse]


class CompleteQuestResponse(BaseModel):
    success: bool
    reward: RewardResponse
    new_badges: list[str] = []


# ============ Mission Schemas ============


class MissionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None = None
    type: str
    target: int
    current: int
    xp_reward: int
    coin_reward: int
    is_completed: bool
    due_date: datetime | None = None
    completed_at: datetime | None = None
    created_at: datetime


class MissionsListResponse(BaseModel):
    missions: list[MissionResponse]


class CreateMissionRequest(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    type: Literal["DAILY", "WEEKLY", "CUSTOM"] = "CUSTOM"
    target: int = Field(default=1, ge=1, le=100)
    xp_reward: int = Field(default=10, ge=0, le=50)
    coin_reward: int = Field(default=5, ge=0, le=25)


class MissionProgressRequest(BaseModel):
    increment: int = 1


class MissionProgressResponse(BaseModel):
    mission: MissionResponse
    is_completed: bool
    reward: RewardResponse | None = None
    new_badges: list[str] = []


# ============ Friend Schemas ============


class FriendsListResponse(BaseModel):
    friends: list[UserSummary]


class FriendRequestItem(BaseModel):
    id: int
    created_at: datetime
    requester: UserSummary


class FriendRequestsResponse(BaseModel):
    requests: list[FriendRequestItem]


class SendFriendRequest(BaseModel):
    user_id: int


class FriendshipResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    requester_id: int
    addressee_id: int
    status: str
    created_at: datetime
    accepted_at: datetime | None = None


# ============ Discovery Schemas ============


class LocationUpdateRequest(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class PotentialMatch(BaseModel):
    id: int
    username: str
    avatar: str | None = None
    bio: str | None = None
    interests: list[str] = []
    level: int
    distance: float | None = None  # km
    shared_interests: int = 0


class PotentialMatchesResponse(BaseModel):
    users: list[PotentialMatch]


class SwipeRequest(BaseModel):
    target_user_id: int
    direction: Literal["LEFT", "RIGHT"]


class SwipeResponse(BaseModel):
    success: bool
    is_match: bool
    match_id: int | None = None


class MatchItem(BaseModel):
    id: int
    user: UserSummary
    created_at: datetime


class MatchesResponse(BaseModel):
    matches: list[MatchItem]


# ============ Payment Schemas ============


class PlanResponse(BaseModel):
    id: str
    name: str
    price: float
    interval: str
    features: list[str]


class PlansResponse(BaseModel):
    plans: list[PlanResponse]


class PowerUpResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    coin_cost: int
    gem_cost: int
    effect: str


class CurrencyPackage(BaseModel):
    id: str
    amount: int
    price: float
    bonus: int


class ShopResponse(BaseModel):
    power_ups: list[PowerUpResponse]
    coin_packages: list[CurrencyPackage]
    gem_packages: list[CurrencyPackage]


class PaymentIntentRequest(BaseModel):
    item_id: str


class PaymentIntentResponse(BaseModel):
    client_secret: str
    amount: int
    currency: str
    item_id: str


class PurchaseRequest(BaseModel):
    item_id: str
    mission_id: int | None = None


class PurchaseResponse(BaseModel):
    success: bool
    item_id: str
    coins: int
    gems: int
    reward: RewardResponse | None = None


# ============ Notification Schemas ============


class NotificationSubscribeRequest(BaseModel):
    player_id: str = Field(min_length=1, max_length=255)


class NotificationSendRequest(BaseModel):
    user_id: int
    message: str = Field(min_length=1, max_length=500)


class SuccessResponse(BaseModel):
    success: bool
