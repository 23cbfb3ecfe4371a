"""Fix text typed with the wrong keyboard layout (Arabic and English)."""

__version__ = "1.0.0"