"""
Unit tests for the secure random source.
"""

from unittest.mock import patch

import pytest

from passbuilder.exceptions import BuilderDisposedError
from passbuilder.utils.random_source import SecureRandom


class TestSecureRandom:
    """Test random integer generation."""

    def test_range_inclusive(self):
        """Test values stay within both bounds and reach them."""
        rng = SecureRandom()
        seen = {rng.next_int(1, 3) for _ in range(300)}
        assert seen == {1, 2, 3}

    def test_swapped_bounds(self):
        """Test that bounds may be given in either order."""
        rng = SecureRandom()
        for _ in range(100):
            assert 5 <= rng.next_int(10, 5) <= 10

    def test_equal_bounds(self):
        """Test that equal bounds return the bound without drawing bytes."""
        rng = SecureRandom()
        with patch("passbuilder.utils.random_source.secrets.token_bytes") as mock_bytes:
            assert rng.next_int(7, 7) == 7
            mock_bytes.assert_not_called()

    def test_negative_range(self):
        rng = SecureRandom()
        for _ in range(50):
            assert -3 <= rng.next_int(-3, 0) <= 0

    def test_uses_secure_bytes(self):
        """Test that values are reduced from OS random bytes."""
        rng = SecureRandom()
        with patch(
            "passbuilder.utils.random_source.secrets.token_bytes",
            return_value=(13).to_bytes(4, "little"),
        ) as mock_bytes:
            assert rng.next_int(0, 9) == 3
            mock_bytes.assert_called_once_with(SecureRandom.INT_SIZE)

    def test_below(self):
        rng = SecureRandom()
        assert all(0 <= rng.below(4) < 4 for _ in range(50))
        with pytest.raises(ValueError):
            rng.below(0)

    def test_choice(self):
        rng = SecureRandom()
        assert rng.choice("x") == "x"
        with pytest.raises(IndexError):
            rng.choice("")

    def test_shuffle_is_permutation(self):
        rng = SecureRandom()
        items = list("abcdefgh")
        rng.shuffle(items)
        assert sorted(items) == list("abcdefgh")

    def test_shuffle_changes_order(self):
        """Test that shuffling eventually produces a different order."""
        rng = SecureRandom()
        original = list(range(20))
        orders = set()
        for _ in range(10):
            items = list(original)
            rng.shuffle(items)
            orders.add(tuple(items))
        assert len(orders) > 1


class TestSecureRandomClose:
    """Test release of the random source."""

    def test_close_is_idempotent(self):
        rng = SecureRandom()
        rng.close()
        rng.close()
        assert rng.closed

    def test_draw_after_close_fails(self):
        rng = SecureRandom()
        rng.close()
        with pytest.raises(BuilderDisposedError):
            rng.next_int(0, 10)

    def test_context_manager(self):
        with SecureRandom() as rng:
            assert not rng.closed
        assert rng.closed


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
