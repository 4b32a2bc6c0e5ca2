"""NudgeQuest backend: quests, missions, discovery and rewards."""

__version__ = "1.0.0"
