"""Tests for manipy.kinematics.chain."""

import logging
import math

import numpy as np
import pytest

from manipy.config import ManipulatorConfig
from manipy.errors import (
    CollisionDetectedError,
    IncompleteChainError,
    RootOrientationOutOfRangeError,
)
from manipy.kinematics.chain import ChainResolver
from manipy.kinematics.position import Position
from manipy.links import BASE_ID, Direction, Link
from manipy.registry import LinkRegistry


def _resolver(*links: Link, config: ManipulatorConfig | None = None) -> ChainResolver:
    registry = LinkRegistry()
    for link in links:
        registry.insert(link)
    return ChainResolver(registry, config)


class TestChainTo:
    def test_root_to_target_order(self):
        resolver = _resolver(Link(1, 1.0), Link(2, 1.0, prev_id=1), Link(3, 1.0, prev_id=2))
        assert resolver.chain_to(3) == (1, 2, 3)
        assert resolver.chain_to(1) == (1,)

    def test_branching(self):
        """Two links sharing a parent each resolve through it."""
        resolver = _resolver(Link(1, 1.0), Link(2, 1.0, prev_id=1), Link(5, 1.0, prev_id=1))
        assert resolver.chain_to(5) == (1, 5)

    def test_missing_ancestor(self):
        resolver = _resolver(Link(2, 1.0, prev_id=7), Link(3, 1.0, prev_id=2))
        with pytest.raises(IncompleteChainError) as exc:
            resolver.chain_to(3)
        assert exc.value.target_id == 3
        assert exc.value.missing_id == 7

    def test_unknown_target(self):
        with pytest.raises(IncompleteChainError):
            _resolver(Link(1, 1.0)).chain_to(4)

    def test_reference_cycle(self):
        resolver = _resolver(Link(2, 1.0, prev_id=3), Link(3, 1.0, prev_id=2))
        with pytest.raises(IncompleteChainError):
            resolver.chain_to(2)


class TestResolve:
    def test_single_upright_link(self):
        result = _resolver(Link(1, 5.0)).resolve(1)
        assert result.success
        assert result.position == Position(0.0, 0.0, 5.0)
        assert result.chain == (1,)

    def test_single_horizontal_link(self):
        result = _resolver(Link(1, 2.0, direction=Direction(np.pi / 2, 0.0))).resolve(1)
        assert result.success
        np.testing.assert_allclose(result.position.to_array(), [2.0, 0.0, 0.0], atol=1e-12)

    def test_cumulative_chain(self):
        """Displacements add up: up 1, then 2 along +X, then 3 along +Y."""
        resolver = _resolver(
            Link(1, 1.0),
            Link(2, 2.0, prev_id=1, direction=Direction(np.pi / 2, 0.0)),
            Link(3, 3.0, prev_id=2, direction=Direction(np.pi / 2, np.pi / 2)),
        )
        result = resolver.resolve(3)
        assert result.success
        np.testing.assert_allclose(result.position.to_array(), [2.0, 3.0, 1.0], atol=1e-12)

    def test_roll_has_no_effect(self):
        plain = _resolver(Link(1, 1.0, direction=Direction(0.3, 0.2, 0.0))).resolve(1)
        rolled = _resolver(Link(1, 1.0, direction=Direction(0.3, 0.2, 2.5))).resolve(1)
        assert plain.position == rolled.position

    def test_deep_link_ignores_root_limits(self):
        """Only the link on the base is limited; later links may point anywhere."""
        resolver = _resolver(
            Link(1, 1.0),
            Link(2, 1.0, prev_id=1, direction=Direction(np.pi / 2, np.pi)),
        )
        result = resolver.resolve(2)
        assert result.success
        np.testing.assert_allclose(result.position.to_array(), [-1.0, 0.0, 1.0], atol=1e-12)

    def test_idempotent(self):
        resolver = _resolver(
            Link(1, 1.5, direction=Direction(0.7, 0.4)),
            Link(2, 0.8, prev_id=1, direction=Direction(1.9, -2.0)),
        )
        assert resolver.resolve(2) == resolver.resolve(2)

    def test_origin_result_is_success(self):
        """A chain folding back to the base still succeeds at the origin."""
        resolver = _resolver(
            Link(1, 1.0),
            Link(2, 1.0, prev_id=1, direction=Direction(np.pi, 0.0)),
        )
        result = resolver.resolve(2)
        assert result.success
        np.testing.assert_allclose(result.position.to_array(), [0.0, 0.0, 0.0], atol=1e-12)


class TestResolveFailures:
    def test_incomplete_chain(self, caplog):
        resolver = _resolver(Link(2, 1.0, prev_id=1), Link(3, 1.0, prev_id=2))
        with caplog.at_level(logging.WARNING):
            for target in (2, 3):
                result = resolver.resolve(target)
                assert not result.success
                assert result.position is None
                assert isinstance(result.error, IncompleteChainError)
        assert "Incomplete chain" in caplog.text

    @pytest.mark.parametrize(
        "direction",
        [Direction(np.pi / 2 + 1e-6, 0.0), Direction(0.5, np.pi / 2 + 1e-6)],
    )
    def test_root_out_of_range(self, direction):
        result = _resolver(Link(1, 1.0, direction=direction)).resolve(1)
        assert not result.success
        assert isinstance(result.error, RootOrientationOutOfRangeError)
        assert result.error.link_id == 1

    def test_root_limit_is_inclusive(self):
        result = _resolver(Link(1, 1.0, direction=Direction(np.pi / 2, np.pi / 2))).resolve(1)
        assert result.success

    def test_root_out_of_range_fails_descendants(self):
        resolver = _resolver(
            Link(1, 1.0, direction=Direction(2.0, 0.0)),
            Link(2, 1.0, prev_id=1),
        )
        assert isinstance(resolver.resolve(2).error, RootOrientationOutOfRangeError)

    def test_custom_root_limit(self):
        config = ManipulatorConfig(root_pitch_limit_rad=0.5)
        result = _resolver(Link(1, 1.0, direction=Direction(0.6, 0.0)), config=config).resolve(1)
        assert isinstance(result.error, RootOrientationOutOfRangeError)
        assert result.error.pitch_limit == 0.5
        assert result.error.yaw_limit == pytest.approx(math.pi / 2)
        assert "pitch <= 0.5000" in str(result.error)

    def test_nan_limit_rejects(self):
        """A limit nothing compares below rejects the root link."""
        config = ManipulatorConfig(root_yaw_limit_rad=math.nan)
        result = _resolver(Link(1, 1.0), config=config).resolve(1)
        assert isinstance(result.error, RootOrientationOutOfRangeError)

    @pytest.mark.parametrize("pitch, yaw", [(math.nan, 0.0), (0.0, math.nan), (math.inf, 0.0)])
    def test_non_finite_direction_rejected(self, pitch, yaw):
        with pytest.raises(ValueError, match="must be finite"):
            Link(1, 1.0, direction=Direction(pitch, yaw))
        link = Link(1, 1.0)
        with pytest.raises(ValueError, match="must be finite"):
            link.set_direction(pitch, yaw)
        assert link.direction == Direction()
        assert _resolver(link).resolve(1).position == Position(0.0, 0.0, 1.0)

    def test_second_link_on_first(self):
        resolver = _resolver(Link(1, 5.0), Link(2, 0.05, prev_id=1))
        result = resolver.resolve(2)
        assert not result.success
        assert isinstance(result.error, CollisionDetectedError)
        assert result.error.link_id == 2
        assert result.error.other_id == 1
        assert result.error.distance == pytest.approx(0.05)

    def test_fold_back_onto_earlier_link(self):
        """Up, back down to the base, up again lands on link 1."""
        resolver = _resolver(
            Link(1, 1.0),
            Link(2, 1.0, prev_id=1, direction=Direction(np.pi, 0.0)),
            Link(3, 1.0, prev_id=2),
        )
        result = resolver.resolve(3)
        assert isinstance(result.error, CollisionDetectedError)
        assert result.error.link_id == 3
        assert result.error.other_id == 1
        assert result.chain == (1, 2, 3)

    def test_collision_in_prefix_fails_target(self):
        resolver = _resolver(
            Link(1, 1.0),
            Link(2, 0.01, prev_id=1),
            Link(3, 5.0, prev_id=2),
        )
        result = resolver.resolve(3)
        assert isinstance(result.error, CollisionDetectedError)
        assert result.error.link_id == 2

    def test_unwrap_raises_error(self):
        result = _resolver(Link(2, 1.0, prev_id=1)).resolve(2)
        with pytest.raises(IncompleteChainError):
            result.unwrap()


class TestResolveRepeatable:
    """Failed resolutions of an unchanged arm compare equal too."""

    def test_incomplete_chain(self):
        resolver = _resolver(Link(2, 1.0, prev_id=1))
        first, second = resolver.resolve(2), resolver.resolve(2)
        assert first.error is not second.error
        assert first == second

    def test_root_out_of_range(self):
        resolver = _resolver(Link(1, 1.0, direction=Direction(2.0, 0.0)))
        assert resolver.resolve(1) == resolver.resolve(1)

    def test_collision(self):
        resolver = _resolver(Link(1, 5.0), Link(2, 0.05, prev_id=1))
        first, second = resolver.resolve(2), resolver.resolve(2)
        assert isinstance(first.error, CollisionDetectedError)
        assert first == second
        assert hash(first.error) == hash(second.error)

    def test_different_failures_differ(self):
        resolver = _resolver(Link(2, 1.0, prev_id=1), Link(3, 1.0, prev_id=4))
        assert resolver.resolve(2) != resolver.resolve(3)


class TestBase:
    def test_links_attach_to_base_id(self):
        resolver = _resolver(Link(1, 2.0, prev_id=BASE_ID))
        assert resolver.chain_to(1) == (1,)

    def test_base_id_is_not_a_link(self):
        with pytest.raises(ValueError, match="is the base"):
            Link(BASE_ID, 1.0)

    def test_config_has_no_base_override(self):
        assert not hasattr(ManipulatorConfig(), "base_id")
