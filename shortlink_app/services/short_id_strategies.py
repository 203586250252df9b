"""
Short id generation strategies.
Uses Strategy Pattern so the service can be given a deterministic generator in tests.
"""

import secrets
import string
from abc import ABC, abstractmethod


class ShortIdStrategy(ABC):
    """Abstract base class for short id generation strategies"""
    
    @abstractmethod
    def generate(self) -> str:
        """
        Generate a candidate short id.
        
        Uniqueness is not checked here: the store's primary key decides.
        """
        pass


class RandomShortIdStrategy(ShortIdStrategy):
    """
    Samples ``length`` characters independently and uniformly from [A-Za-z0-9].
    
    Ids are unrelated to the url they point to, which is why the service
    looks a url up before generating an id for it.
    """
    
    ALPHABET = string.ascii_letters + string.digits
    
    def __init__(self, length: int = 6):
        if length < 1:
            raise ValueError(f"Short id length must be positive, got {length}")
        self.length = length
    
    def generate(self) -> str:
        return ''.join(secrets.choice(self.ALPHABET) for _ in range(self.length))
