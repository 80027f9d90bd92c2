from ballgame.types.symbol import Symbol
from ballgame.types.character import Character

__all__ = ["Symbol", "Character"]
