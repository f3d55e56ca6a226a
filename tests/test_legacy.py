"""Tests for the legacy lockstep group."""

import pytest

from keyframe_animator import (
    AnimationGroupLegacy,
    AnimationSequenceLegacy,
    Keyframe,
    NumberAnimationHelper,
    PlaybackState,
    Point,
    PointAnimationHelper,
)


@pytest.fixture
def legacy_group(target, point_keyframes):
    sequence = AnimationSequenceLegacy(
        keyframes=point_keyframes,
        apply_animation_value=target.set_position,
        animatable_attribute_helper=PointAnimationHelper(),
    )
    return AnimationGroupLegacy([sequence])


class TestLegacyGroup:
    """Scenarios ported from the legacy suite."""

    def test_play_to_end(self, target, legacy_group, run_ticks):
        legacy_group.set_duration(2)
        legacy_group.start_animation()
        run_ticks(legacy_group, 21, 0.1)
        assert target.position == Point(10, 10)

    def test_without_start_nothing_changes(self, target, legacy_group, run_ticks):
        run_ticks(legacy_group, 11, 0.1)
        assert target.position == Point(0, 0)

    def test_cancel_freezes_value(self, target, legacy_group, run_ticks):
        legacy_group.start_animation()
        run_ticks(legacy_group, 4, 0.1)
        legacy_group.cancel_animation()
        frozen = target.position
        run_ticks(legacy_group, 7, 0.1)
        assert target.position == frozen
        assert legacy_group.state == PlaybackState.STOPPED

    def test_played_according_to_keyframes(self, target, legacy_group, run_ticks):
        legacy_group.start_animation()
        run_ticks(legacy_group, 5, 0.1)
        assert target.position.x == pytest.approx(3)
        assert target.position.y == pytest.approx(3)

    def test_fine_ticks_run_without_error(self, target, legacy_group, run_ticks):
        legacy_group.start_animation()
        run_ticks(legacy_group, 101, 0.01)
        assert target.position == Point(10, 10)


class TestLegacySemantics:
    """Behavior specific to the legacy surface."""

    def test_start_after_cancel_restarts(self, target, legacy_group, run_ticks):
        legacy_group.start_animation()
        run_ticks(legacy_group, 5, 0.1)
        legacy_group.cancel_animation()
        legacy_group.start_animation()
        assert legacy_group.elapsed_time == 0.0
        run_ticks(legacy_group, 1, 0.1)
        assert target.position.x == pytest.approx(0.6)

    def test_sequences_move_in_lockstep(self, target, legacy_group, run_ticks):
        legacy_group.add_sequence(AnimationSequenceLegacy(
            [Keyframe(0, 0.0), Keyframe(1, 100.0)],
            target.set_number,
            NumberAnimationHelper(),
        ))
        legacy_group.start_animation()
        run_ticks(legacy_group, 5, 0.1)
        assert target.number == pytest.approx(50)
        assert target.position.x == pytest.approx(3)

    def test_matches_single_animation(self, target, point_keyframes, point_animation):
        """Same track, same duration, same values."""
        legacy_values = []
        group = AnimationGroupLegacy([AnimationSequenceLegacy(
            point_keyframes, legacy_values.append, PointAnimationHelper(),
        )])
        group.start_animation()
        point_animation.start_animation()
        for _ in range(12):
            group.animate(0.1)
            point_animation.animate(0.1)
            assert legacy_values[-1] == target.position

    def test_sequence_easing(self, target):
        group = AnimationGroupLegacy([AnimationSequenceLegacy(
            [Keyframe(0, 0.0), Keyframe(1, 1.0)],
            target.set_number,
            NumberAnimationHelper(),
            easing_function="ease_in_quad",
        )])
        group.start_animation()
        group.animate(0.5)
        assert target.number == pytest.approx(0.25)

    def test_initial_state_playing(self, target, point_keyframes):
        group = AnimationGroupLegacy(
            [AnimationSequenceLegacy(point_keyframes, target.set_position, PointAnimationHelper())],
            duration=1.0,
            state=PlaybackState.PLAYING,
        )
        group.animate(0.5)
        assert target.position.x == pytest.approx(3)

    def test_zero_duration(self, target, legacy_group):
        legacy_group.set_duration(0)
        legacy_group.start_animation()
        legacy_group.animate(0.1)
        assert target.position == Point(10, 10)

    def test_empty_sequence_skipped(self, target, legacy_group):
        calls = []
        legacy_group.add_sequence(AnimationSequenceLegacy([], calls.append, NumberAnimationHelper()))
        legacy_group.start_animation()
        legacy_group.animate(0.1)
        assert calls == []
