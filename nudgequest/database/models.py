"""
Database models for NudgeQuest.

Structure:
- User: account, wallet (xp/coins/gems), streak, discovery profile
- Quest / UserQuest: quest catalog and a user's run of a quest
- Mission: day-scoped or custom task with incremental progress
- Swipe / Match: discovery signals and mutual outcomes
- Friendship: friend request, pending or accepted
- UserBadge: earned badge
- Purchase: shop purchase paid with coins or gems
"""

from tortoise import fields, models


class User(models.Model):
    """Application user."""

    id = fields.IntField(primary_key=True)
    email = fields.CharField(max_length=255, unique=True, db_index=True)
    username = fields.CharField(max_length=20, unique=True)
    password_hash = fields.CharField(max_length=128)
    avatar = fields.CharField(max_length=500, null=True)

    # Profile
    bio = fields.TextField(null=True)
    interests: list[str] = fields.JSONField(default=list)

    # Gamification
    xp = fields.IntField(default=0)
    level = fields.IntField(default=1)  # always floor(xp / 100) + 1
    coins = fields.IntField(default=100)
    gems = fields.IntField(default=0)
    streak = fields.IntField(default=0)
    last_active_date = fields.DateField(null=True)

    # Subscription
    is_premium = fields.BooleanField(default=False)
    premium_expires_at = fields.DatetimeField(null=True)

    # Discovery
    location_enabled = fields.BooleanField(default=False)
    discovery_enabled = fields.BooleanField(default=True)
    discovery_radius = fields.IntField(default=50)  # km
    latitude = fields.FloatField(null=True)
    longitude = fields.FloatField(null=True)

    # Push notifications (OneSignal player id)
    push_player_id = fields.CharField(max_length=255, null=True)

    # Active power-ups (UTC)
    xp_boost_until = fields.DatetimeField(null=True)
    coin_boost_until = fields.DatetimeField(null=True)
    streak_shield_until = fields.DatetimeField(null=True)

    created_at = fields.DatetimeField(auto_now_add=True)

    missions: fields.ReverseRelation["Mission"]
    user_quests: fields.ReverseRelation["UserQuest"]
    user_badges: fields.ReverseRelation["UserBadge"]

    class Meta:
        table = "users"


class Quest(models.Model):
    """Long-running goal from the catalog."""

    id = fields.IntField(primary_key=True)
    title = fields.CharField(max_length=255)
    description = fields.TextField(null=True)
    category = fields.CharField(max_length=50)

    # Difficulty: EASY, MEDIUM, HARD, EXPERT
    difficulty = fields.CharField(max_length=10, default="EASY")

    xp_reward = fields.IntField(default=50)
    coin_reward = fields.IntField(default=25)
    is_active = fields.BooleanField(default=True)

    class Meta:
        table = "quests"


class UserQuest(models.Model):
    """A user's run of a quest."""

    id = fields.IntField(primary_key=True)
    user: fields.ForeignKeyRelation[User] = fields.ForeignKeyField(
        "models.User", related_name="user_quests", on_delete=fields.CASCADE
    )
    user_id: int
    quest: fields.ForeignKeyRelation[Quest] = fields.ForeignKeyField(
        "models.Quest", related_name="runs", on_delete=fields.CASCADE
    )
    quest_id: int

    # Status: ACTIVE, COMPLETED, FAILED
    status = fields.CharField(max_length=20, default="ACTIVE")
    progress = fields.IntField(default=0)  # 0-100

    started_at = fields.DatetimeField(auto_now_add=True)
    completed_at = fields.DatetimeField(null=True)

    class Meta:
        table = "user_quests"
        unique_together = (("user", "quest"),)


class Mission(models.Model):
    """
    Short task with incremental progress.
    ACTIVE while current < target, COMPLETED (terminal) once it reaches target.
    """

    id = fields.IntField(primary_key=True)
    user: fields.ForeignKeyRelation[User] = fields.ForeignKeyField(
        "models.User", related_name="missions", on_delete=fields.CASCADE
    )
    user_id: int

    title = fields.CharField(max_length=255)
    description = fields.TextField(null=True)

    # Type: DAILY, WEEKLY, CUSTOM
    type = fields.CharField(max_length=10, default="CUSTOM")

    target = fields.IntField(default=1)
    current = fields.IntField(default=0)
    xp_reward = fields.IntField(default=10)
    coin_reward = fields.IntField(default=5)

    is_completed = fields.BooleanField(default=False)
    due_date = fields.DatetimeField(null=True)
    completed_at = fields.DatetimeField(null=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "missions"


class Swipe(models.Model):
    """Directional preference of one user about another."""

    id = fields.IntField(primary_key=True)
    swiper: fields.ForeignKeyRelation[User] = fields.ForeignKeyField(
        "models.User", related_name="swipes_made", on_delete=fields.CASCADE
    )
    swiper_id: int
    swiped: fields.ForeignKeyRelation[User] = fields.ForeignKeyField(
        "models.User", related_name="swipes_received", on_delete=fields.CASCADE
    )
    swiped_id: int

    # Direction: LEFT, RIGHT
    direction = fields.CharField(max_length=5)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "swipes"
        unique_together = (("swiper", "swiped"),)


class Match(models.Model):
    """
    Mutual RIGHT swipe.
    The pair is stored ordered (user_one_id < user_two_id), one row per pair.
    """

    id = fields.IntField(primary_key=True)
    user_one: fields.ForeignKeyRelation[User] = fields.ForeignKeyField(
        "models.User", related_name="matches_as_one", on_delete=fields.CASCADE
    )
    user_one_id: int
    user_two: fields.ForeignKeyRelation[User] = fields.ForeignKeyField(
        "models.User", related_name="matches_as_two", on_delete=fields.CASCADE
    )
    user_two_id: int

    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "matches"
        unique_together = (("user_one", "user_two"),)


class Friendship(models.Model):
    """
    Friend request between two users.
    pair_key ("<smaller id>:<larger id>") allows one row per pair, whichever side asked.
    """

    id = fields.IntField(primary_key=True)
    requester: fields.ForeignKeyRelation[User] = fields.ForeignKeyField(
        "models.User", related_name="sent_requests", on_delete=fields.CASCADE
    )
    requester_id: int
    addressee: fields.ForeignKeyRelation[User] = fields.ForeignKeyField(
        "models.User", related_name="received_requests", on_delete=fields.CASCADE
    )
    addressee_id: int

    # Status: PENDING, ACCEPTED
    status = fields.CharField(max_length=10, default="PENDING")
    created_at = fields.DatetimeField(auto_now_add=True)
    accepted_at = fields.DatetimeField(null=True)
    pair_key = fields.CharField(max_length=41, unique=True)

    class Meta:
        table = "friendships"


class UserBadge(models.Model):
    """Badge earned by a user."""

    id = fields.IntField(primary_key=True)
    user: fields.ForeignKeyRelation[User] = fields.ForeignKeyField(
        "models.User", related_name="user_badges", on_delete=fields.CASCADE
    )
    user_id: int
    badge = fields.CharField(max_length=50)
    earned_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "user_badges"
        unique_together = (("user", "badge"),)


class Purchase(models.Model):
    """
    Shop purchase.
    Power-ups are paid with coins/gems; plans and currency packages with a
    Stripe PaymentIntent (payment_intent_id, one row per intent).
    """

    id = fields.IntField(primary_key=True)
    user: fields.ForeignKeyRelation[User] = fields.ForeignKeyField(
        "models.User", related_name="purchases", on_delete=fields.CASCADE
    )
    user_id: int
    item_id = fields.CharField(max_length=50)
    coin_cost = fields.IntField(default=0)
    gem_cost = fields.IntField(default=0)
    payment_intent_id = fields.CharField(max_length=255, null=True, unique=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "purchases"
