"""
Short path generation strategies for the link store.
Uses Strategy Pattern to allow different generation algorithms.
"""

import string
import random
from abc import ABC, abstractmethod
from typing import Callable

from shortlink_app.errors import LinkCreationError


class ShortCodeStrategy(ABC):
    """Abstract base class for short path generation strategies"""
    
    @abstractmethod
    def generate(self, link_id: int, is_taken: Callable[[str], bool]) -> str:
        """
        Generate a short path.
        
        Args:
            link_id: Store-assigned sequential ID of the new link
            is_taken: Callback reporting whether a path is already stored
            
        Returns:
            A short path not yet used by any link
        """
        pass


class RandomShortCodeStrategy(ShortCodeStrategy):
    """
    Random generation strategy.
    Draws a random string and asks the store whether it is taken.
    
    Pros: Simple, unpredictable
    Cons: Collision risk, one store query per attempt
    """
    
    def __init__(self, length: int = 6, max_retries: int = 5):
        self.length = length
        self.max_retries = max_retries
        self.characters = string.ascii_letters + string.digits
    
    def generate(self, link_id: int, is_taken: Callable[[str], bool]) -> str:
        """Generate random short path with collision checking"""
        for _ in range(self.max_retries):
            path = self._generate_random_string()
            if not is_taken(path):
                return path
        
        raise LinkCreationError(
            f"Could not generate unique short path after {self.max_retries} attempts"
        )
    
    def _generate_random_string(self) -> str:
        """Generate a random string of specified length"""
        return ''.join(random.choice(self.characters) for _ in range(self.length))


class Base62ShortCodeStrategy(ShortCodeStrategy):
    """
    Base62 encoding strategy with ID obfuscation.
    Converts the sequential link ID to Base62 with salt.
    
    Pros: No collisions, no store queries
    Cons: Predictable if salt is known
    """
    
    BASE62_CHARS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
    
    def __init__(self, salt: int = 1000, max_length: int = 6):
        self.salt = salt
        self.max_length = max_length
    
    def generate(self, link_id: int, is_taken: Callable[[str], bool]) -> str:
        """
        Generate short path using Base62 encoding of (ID + salt).
        
        Raises LinkCreationError if the encoding exceeds max_length, since
        truncating would produce duplicates.
        """
        obfuscated_id = link_id + self.salt
        encoded = self._base62_encode(obfuscated_id)
        
        if len(encoded) > self.max_length:
            raise LinkCreationError(
                f"Generated path '{encoded}' exceeds max length {self.max_length}. "
                f"Link ID: {link_id}, Obfuscated ID: {obfuscated_id}. "
                f"Consider increasing salt or max_length to handle higher volume."
            )
        
        # Caller-chosen paths share the namespace with generated ones
        if is_taken(encoded):
            raise LinkCreationError(f"Generated path '{encoded}' is already in use")
        
        return encoded
    
    def _base62_encode(self, number: int) -> str:
        """
        Convert integer to Base62 string.
        
        Base62 uses: 0-9 (10) + a-z (26) + A-Z (26) = 62 characters
        """
        if number == 0:
            return self.BASE62_CHARS[0]
        
        result = ""
        while number > 0:
            result = self.BASE62_CHARS[number % 62] + result
            number //= 62
        
        return result
