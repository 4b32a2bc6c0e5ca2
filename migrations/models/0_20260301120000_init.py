from tortoise import BaseDBAsyncClient

RUN_IN_TRANSACTION = True


async def upgrade(db: BaseDBAsyncClient) -> str:
    return """
        CREATE TABLE IF NOT EXISTS "users" (
    "id" SERIAL NOT NULL PRIMARY KEY,
    "email" VARCHAR(255) NOT NULL UNIQUE,
    "username" VARCHAR(20) NOT NULL UNIQUE,
    "password_hash" VARCHAR(128) NOT NULL,
    "avatar" VARCHAR(500),
    "bio" TEXT,
    "interests" JSONB NOT NULL,
    "xp" INT NOT NULL DEFAULT 0,
    "level" INT NOT NULL DEFAULT 1,
    "coins" INT NOT NULL DEFAULT 100,
    "gems" INT NOT NULL DEFAULT 0,
    "streak" INT NOT NULL DEFAULT 0,
    "last_active_date" DATE,
    "is_premium" BOOL NOT NULL DEFAULT False,
    "premium_expires_at" TIMESTAMPTZ,
    "location_enabled" BOOL NOT NULL DEFAULT False,
    "discovery_enabled" BOOL NOT NULL DEFAULT True,
    "discovery_radius" INT NOT NULL DEFAULT 50,
    "latitude" DOUBLE PRECISION,
    "longitude" DOUBLE PRECISION,
    "push_player_id" VARCHAR(255),
    "xp_boost_until" TIMESTAMPTZ,
    "coin_boost_until" TIMESTAMPTZ,
    "streak_shield_until" TIMESTAMPTZ,
    "created_at" TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP
);
CREATE INDEX IF NOT EXISTS "idx_users_email_9e2a61" ON "users" ("email");
COMMENT ON TABLE "users" IS 'Application user.';
CREATE TABLE IF NOT EXISTS "quests" (
    "id" SERIAL NOT NULL PRIMARY KEY,
    "title" VARCHAR(255) NOT NULL,
    "description" TEXT,
    "category" VARCHAR(50) NOT NULL,
    "difficulty" VARCHAR(10) NOT NULL DEFAULT 'EASY',
    "xp_reward" INT NOT NULL DEFAULT 50,
    "coin_reward" INT NOT NULL DEFAULT 25,
    "is_active" BOOL NOT NULL DEFAULT True
);
COMMENT ON TABLE "quests" IS 'Long-running goal from the catalog.';
CREATE TABLE IF NOT EXISTS "user_quests" (
    "id" SERIAL NOT NULL PRIMARY KEY,
    "status" VARCHAR(20) NOT NULL DEFAULT 'ACTIVE',
    "progress" INT NOT NULL DEFAULT 0,
    "started_at" TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP,
    "completed_at" TIMESTAMPTZ,
    "quest_id" INT NOT NULL REFERENCES "quests" ("id") ON DELETE CASCADE,
    "user_id" INT NOT NULL REFERENCES "users" ("id") ON DELETE CASCADE,
    CONSTRAINT "uid_user_quests_user_id_5b1c0e" UNIQUE ("user_id", "quest_id")
);
COMMENT ON TABLE "user_quests" IS 'A user''s run of a quest.';
CREATE TABLE IF NOT EXISTS "missions" (
    "id" SERIAL NOT NULL PRIMARY KEY,
    "title" VARCHAR(255) NOT NULL,
    "description" TEXT,
    "type" VARCHAR(10) NOT NULL DEFAULT 'CUSTOM',
    "target" INT NOT NULL DEFAULT 1,
    "current" INT NOT NULL DEFAULT 0,
    "xp_reward" INT NOT NULL DEFAULT 10,
    "coin_reward" INT NOT NULL DEFAULT 5,
    "is_completed" BOOL NOT NULL DEFAULT False,
    "due_date" TIMESTAMPTZ,
    "completed_at" TIMESTAMPTZ,
    "created_at" TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP,
    "user_id" INT NOT NULL REFERENCES "users" ("id") ON DELETE CASCADE
);
COMMENT ON TABLE "missions" IS 'Short task with incremental progress.';
CREATE TABLE IF NOT EXISTS "swipes" (
    "id" SERIAL NOT NULL PRIMARY KEY,
    "direction" VARCHAR(5) NOT NULL,
    "created_at" TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP,
    "swiped_id" INT NOT NULL REFERENCES "users" ("id") ON DELETE CASCADE,
    "swiper_id" INT NOT NULL REFERENCES "users" ("id") ON DELETE CASCADE,
    CONSTRAINT "uid_swipes_swiper__0d7f3a" UNIQUE ("swiper_id", "swiped_id")
);
COMMENT ON TABLE "swipes" IS 'Directional preference of one user about another.';
CREATE TABLE IF NOT EXISTS "matches" (
    "id" SERIAL NOT NULL PRIMARY KEY,
    "created_at" TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP,
    "user_one_id" INT NOT NULL REFERENCES "users" ("id") ON DELETE CASCADE,
    "user_two_id" INT NOT NULL REFERENCES "users" ("id") ON DELETE CASCADE,
    CONSTRAINT "uid_matches_user_on_8c42d1" UNIQUE ("user_one_id", "user_two_id")
);
COMMENT ON TABLE "matches" IS 'Mutual RIGHT swipe.';
CREATE TABLE IF NOT EXISTS "friendships" (
    "id" SERIAL NOT NULL PRIMARY KEY,
    "status" VARCHAR(10) NOT NULL DEFAULT 'PENDING',
    "created_at" TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP,
    "accepted_at" TIMESTAMPTZ,
    "pair_key" VARCHAR(41) NOT NULL UNIQUE,
    "addressee_id" INT NOT NULL REFERENCES "users" ("id") ON DELETE CASCADE,
    "requester_id" INT NOT NULL REFERENCES "users" ("id") ON DELETE CASCADE
);
COMMENT ON TABLE "friendships" IS 'Friend request between two users.';
CREATE TABLE IF NOT EXISTS "user_badges" (
    "id" SERIAL NOT NULL PRIMARY KEY,
    "badge" VARCHAR(50) NOT NULL,
    "earned_at" TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP,
    "user_id" INT NOT NULL REFERENCES "users" ("id") ON DELETE CASCADE,
    CONSTRAINT "uid_user_badges_user_id_a71e95" UNIQUE ("user_id", "badge")
);
COMMENT ON TABLE "user_badges" IS 'Badge earned by a user.';
CREATE TABLE IF NOT EXISTS "purchases" (
    "id" SERIAL NOT NULL PRIMARY KEY,
    "item_id" VARCHAR(50) NOT NULL,
    "coin_cost" INT NOT NULL DEFAULT 0,
    "gem_cost" INT NOT NULL DEFAULT 0,
    "payment_intent_id" VARCHAR(255) UNIQUE,
    "created_at" TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP,
    "user_id" INT NOT NULL REFERENCES "users" ("id") ON DELETE CASCADE
);
COMMENT ON TABLE "purchases" IS 'Shop purchase paid with in-app currency.';
CREATE TABLE IF NOT EXISTS "aerich" (
    "id" SERIAL NOT NULL PRIMARY KEY,
    "version" VARCHAR(255) NOT NULL,
    "app" VARCHAR(100) NOT NULL,
    "content" JSONB NOT NULL
);"""


async def downgrade(db: BaseDBAsyncClient) -> str:
    return """
        DROP TABLE IF EXISTS "purchases";
        DROP TABLE IF EXISTS "user_badges";
        DROP TABLE IF EXISTS "friendships";
        DROP TABLE IF EXISTS "matches";
        DROP TABLE IF EXISTS "swipes";
        DROP TABLE IF EXISTS "missions";
        DROP TABLE IF EXISTS "user_quests";
        DROP TABLE IF EXISTS "quests";
        DROP TABLE IF EXISTS "users";"""
