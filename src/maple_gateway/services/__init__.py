"""서비스 레이어"""

from .character_service import CharacterService

__all__ = ["CharacterService"]
