"""
Tests for short path generation strategies.
"""
import pytest

from shortlink_app.errors import LinkCreationError
from shortlink_app.services.short_code_strategies import (
    RandomShortCodeStrategy,
    Base62ShortCodeStrategy
)
from shortlink_app.services.short_code_factory import (
    ShortCodeFactory,
    ShortCodeStrategyType
)


def never_taken(path: str) -> bool:
    return False


def always_taken(path: str) -> bool:
    return True


class TestRandomStrategy:
    """Test random generation strategy"""

    def test_generates_requested_length(self):
        strategy = RandomShortCodeStrategy(length=6, max_retries=5)

        path = strategy.generate(link_id=1, is_taken=never_taken)

        assert len(path) == 6
        assert path.isalnum()

    def test_retries_on_collision(self):
        strategy = RandomShortCodeStrategy(length=6, max_retries=5)
        attempts = []

        def taken_twice(path):
            attempts.append(path)
            return len(attempts) <= 2

        path = strategy.generate(link_id=1, is_taken=taken_twice)

        assert len(attempts) == 3
        assert path == attempts[-1]

    def test_gives_up_after_max_retries(self):
        strategy = RandomShortCodeStrategy(length=6, max_retries=3)

        with pytest.raises(LinkCreationError, match="after 3 attempts"):
            strategy.generate(link_id=1, is_taken=always_taken)


class TestBase62Strategy:
    """Test Base62 encoding strategy"""
    
    def test_generates_correct_length(self):
        strategy = Base62ShortCodeStrategy(salt=1000, max_length=5)
        
        path = strategy.generate(link_id=1, is_taken=never_taken)
        
        assert len(path) <= 5

    def test_same_id_same_path(self):
        """Same ID generates same path (deterministic)"""
        strategy = Base62ShortCodeStrategy(salt=1000, max_length=5)
        
        assert strategy.generate(123, never_taken) == strategy.generate(123, never_taken)
    
    def test_different_id_different_path(self):
        strategy = Base62ShortCodeStrategy(salt=1256, max_length=5)

        paths = {strategy.generate(link_id, never_taken) for link_id in range(1, 101)}

        assert len(paths) == 100
    
    def test_obfuscation_with_salt(self):
        strategy_no_salt = Base62ShortCodeStrategy(salt=0, max_length=5)
        strategy_with_salt = Base62ShortCodeStrategy(salt=1000, max_length=5)
        
        assert strategy_no_salt.generate(1, never_taken) != strategy_with_salt.generate(1, never_taken)

    def test_known_encodings(self):
        strategy = Base62ShortCodeStrategy(salt=0, max_length=5)

        assert strategy.generate(61, never_taken) == "Z"
        assert strategy.generate(62, never_taken) == "10"
        assert strategy._base62_encode(0) == "0"

    def test_exceeding_max_length(self):
        """62^5 needs six characters"""
        strategy = Base62ShortCodeStrategy(salt=0, max_length=5)

        with pytest.raises(LinkCreationError, match="exceeds max length 5"):
            strategy.generate(62 ** 5, never_taken)

    def test_taken_path_is_rejected(self):
        """A caller-chosen path can occupy a generated one"""
        strategy = Base62ShortCodeStrategy(salt=0, max_length=5)

        with pytest.raises(LinkCreationError, match="already in use"):
            strategy.generate(1, always_taken)


class TestShortCodeFactory:
    """Test strategy factory"""
    
    def test_creates_random_strategy(self):
        strategy = ShortCodeFactory.create_strategy(ShortCodeStrategyType.RANDOM)
        assert isinstance(strategy, RandomShortCodeStrategy)
    
    def test_creates_base62_strategy(self):
        strategy = ShortCodeFactory.create_strategy(ShortCodeStrategyType.BASE62)
        assert isinstance(strategy, Base62ShortCodeStrategy)

    def test_instances_are_cached(self):
        first = ShortCodeFactory.create_strategy(ShortCodeStrategyType.BASE62)
        assert ShortCodeFactory.create_strategy(ShortCodeStrategyType.BASE62) is first

    def test_creates_default_from_settings(self):
        """Factory uses settings when no type specified (random by default)"""
        strategy = ShortCodeFactory.create_strategy()
        assert isinstance(strategy, RandomShortCodeStrategy)
