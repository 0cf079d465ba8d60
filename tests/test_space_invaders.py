"""
Tests for the Space Invaders game wrapper, RL environment and input session.
"""

import numpy as np
import pytest

from invaders.engine import AlienType, Bullet, Instruction, Position
from invaders.game import (
    Action,
    GameSession,
    GameState,
    SpaceInvadersConfig,
    SpaceInvadersEnv,
    SpaceInvadersGame,
)


def drop_bullet_on_cannon(game: SpaceInvadersGame) -> None:
    """Place an alien bullet that hits the cannon on the next step."""
    cannon = game.play_field.cannon
    game.play_field._bullets.append(Bullet.alien_at(
        Position(cannon.position.x + 2, cannon.position.y), AlienType.HARD
    ))


class TestSpaceInvadersGame:
    """Tests for SpaceInvadersGame class."""

    def test_game_metadata(self):
        metadata = SpaceInvadersGame.get_metadata()

        assert metadata.id == "space_invaders"
        assert metadata.name == "Space Invaders"

    def test_action_space_size(self, never_fire_rng):
        """Test action space is 6 (movement x firing combinations)."""
        game = SpaceInvadersGame(rng=never_fire_rng)

        assert game.action_space_size == 6
        assert len(game.action_names) == 6
        assert "Fire" in game.action_names[Action.STAY_FIRE]
        assert "Left" in game.action_names[Action.LEFT_NO_FIRE]

    def test_action_decoding(self):
        assert Action.STAY_NO_FIRE.instruction == Instruction.NONE
        assert Action.LEFT_FIRE.instruction == Instruction.MOVE_LEFT
        assert Action.RIGHT_NO_FIRE.instruction == Instruction.MOVE_RIGHT
        assert Action.RIGHT_FIRE.fire
        assert not Action.LEFT_NO_FIRE.fire

    def test_valid_actions(self, never_fire_rng):
        game = SpaceInvadersGame(rng=never_fire_rng)
        assert game.is_valid_action(0)
        assert game.is_valid_action(5)
        assert not game.is_valid_action(6)
        assert not game.is_valid_action(-1)

    def test_invalid_action_raises(self, never_fire_rng):
        game = SpaceInvadersGame(rng=never_fire_rng)
        with pytest.raises(ValueError):
            game.step(9)


class TestGameInitialization:
    """Tests for game reset and initial state."""

    def test_reset_creates_valid_state(self, never_fire_rng):
        game = SpaceInvadersGame(rng=never_fire_rng)
        state = game.reset()

        for key in ("cannon", "aliens", "bunkers", "bullets", "score", "lives", "game_over"):
            assert key in state
        assert state["score"] == 0
        assert state["lives"] == 3
        assert state["aliens_alive"] == 55
        assert state["total_aliens"] == 55
        assert state["game_over"] is False

    def test_aliens_5x11_formation(self, never_fire_rng):
        state = SpaceInvadersGame(rng=never_fire_rng).reset()

        assert len(state["aliens"]) == 5
        assert all(len(row) == 11 for row in state["aliens"])

    def test_reset_replaces_field(self, never_fire_rng):
        game = SpaceInvadersGame(rng=never_fire_rng)
        old_field = game.play_field
        game.step(Action.LEFT_FIRE)

        game.reset()

        assert game.play_field is not old_field
        assert game.play_field.bullets == ()
        assert game.frame_count == 0

    def test_start_lives_from_config(self, never_fire_rng):
        game = SpaceInvadersGame(config={"player_start_lives": 5}, rng=never_fire_rng)
        assert game.play_field.lives == 5


class TestGameStep:
    """Tests for rewards and game over."""

    def test_step_returns_tuple(self, never_fire_rng):
        game = SpaceInvadersGame(rng=never_fire_rng)
        state, reward, done, info = game.step(Action.STAY_NO_FIRE)

        assert isinstance(state, dict)
        assert isinstance(reward, float)
        assert done is False
        assert info["score"] == 0
        assert info["survived"] is True

    def test_move_actions(self, never_fire_rng):
        game = SpaceInvadersGame(rng=never_fire_rng)
        start = game.play_field.cannon.position.x

        game.step(Action.LEFT_NO_FIRE)
        assert game.play_field.cannon.position.x == start - 1

        game.step(Action.RIGHT_FIRE)
        assert game.play_field.cannon.position.x == start
        assert len(game.play_field.bullets) == 1

    def test_kill_reward(self, never_fire_rng):
        game = SpaceInvadersGame(rng=never_fire_rng)
        game.step(Action.STAY_FIRE)

        for _ in range(300):
            _, reward, _, info = game.step(Action.STAY_NO_FIRE)
            if info["score"] == 10:
                break

        assert game.score == 10
        assert reward == pytest.approx(10 * game.reward_per_point + game.reward_step_penalty)

    def test_death_penalty(self, never_fire_rng):
        game = SpaceInvadersGame(rng=never_fire_rng)
        drop_bullet_on_cannon(game)

        _, reward, done, info = game.step(Action.STAY_NO_FIRE)

        assert info["survived"] is False
        assert info["lives"] == 2
        assert done is False
        assert reward == pytest.approx(game.reward_death + game.reward_step_penalty)

    def test_game_over_when_no_lives(self, never_fire_rng):
        game = SpaceInvadersGame(config={"player_start_lives": 1}, rng=never_fire_rng)
        drop_bullet_on_cannon(game)

        _, reward, done, _ = game.step(Action.STAY_NO_FIRE)

        assert done is True
        assert game.game_over is True
        assert reward == pytest.approx(
            game.reward_death + game.reward_game_over + game.reward_step_penalty
        )

        # Further steps are no-ops
        frames = game.frame_count
        _, reward, done, _ = game.step(Action.STAY_FIRE)
        assert done is True
        assert reward == 0.0
        assert game.frame_count == frames

    def test_cleared_formation_ends_game(self, never_fire_rng):
        game = SpaceInvadersGame(rng=never_fire_rng)
        for i in range(len(game.play_field.aliens)):
            game.play_field.aliens.slots[i] = None

        _, reward, done, info = game.step(Action.STAY_NO_FIRE)

        assert done is True
        assert info["cleared"] is True
        assert reward == pytest.approx(game.reward_wave_clear + game.reward_step_penalty)

    def test_cleared_formation_can_continue(self, never_fire_rng):
        game = SpaceInvadersGame(config={"end_on_clear": False}, rng=never_fire_rng)
        for i in range(len(game.play_field.aliens)):
            game.play_field.aliens.slots[i] = None

        _, first_reward, done, info = game.step(Action.STAY_NO_FIRE)
        assert done is False
        assert info["cleared"] is True

        # Clear bonus is only paid once
        _, second_reward, _, _ = game.step(Action.STAY_NO_FIRE)
        assert second_reward == pytest.approx(game.reward_step_penalty)
        assert first_reward > second_reward

    def test_seed_reproducible(self):
        games = [SpaceInvadersGame(config={"seed": 5}), SpaceInvadersGame(config={"seed": 5})]
        for _ in range(40):
            states = [game.step(Action.STAY_FIRE)[0] for game in games]
            assert states[0] == states[1]


class TestSpaceInvadersEnv:
    """Tests for SpaceInvadersEnv class."""

    def test_env_sizes(self):
        env = SpaceInvadersEnv()
        assert env.state_size == 24
        assert env.action_size == 6

    def test_env_reset_returns_numpy(self):
        env = SpaceInvadersEnv()
        state = env.reset()

        assert isinstance(state, np.ndarray)
        assert state.shape == (24,)
        assert state.dtype == np.float32

    def test_env_initial_features(self):
        env = SpaceInvadersEnv()
        state = env.reset()

        assert state[1] == pytest.approx(1.0)       # full lives
        assert state[6] == pytest.approx(1.0)       # all aliens alive
        assert np.allclose(state[18:22], 1.0)      # bunkers intact
        assert state[23] == pytest.approx(1.0)      # column above cannon

    def test_env_step_returns_correct_tuple(self):
        env = SpaceInvadersEnv()
        env.reset()
        state, reward, done, info = env.step(Action.STAY_FIRE)

        assert state.shape == (24,)
        assert isinstance(reward, float)
        assert isinstance(done, bool)
        assert "score" in info

    def test_env_state_normalized(self):
        env = SpaceInvadersEnv(config=SpaceInvadersConfig(seed=3))
        env.reset()

        for step in range(40):
            state, _, done, _ = env.step(step % 6)
            assert np.all(state >= 0.0)
            assert np.all(state <= 1.0)
            if done:
                break

    def test_env_seed(self):
        envs = [SpaceInvadersEnv(), SpaceInvadersEnv()]
        for env in envs:
            env.seed(21)
            env.reset()

        for _ in range(30):
            states = [env.step(Action.RIGHT_FIRE)[0] for env in envs]
            assert np.array_equal(states[0], states[1])

    def test_env_uses_config_rewards(self):
        config = SpaceInvadersConfig(reward_death=-99.0)
        env = SpaceInvadersEnv(config=config)
        assert env.game.reward_death == -99.0

    def test_env_get_game_state(self):
        env = SpaceInvadersEnv()
        env.reset()
        state = env.get_game_state()
        assert "cannon" in state
        assert env.get_score() == state["score"]


class TestGameSession:
    """Tests for the key-driven session."""

    def test_starts_running(self):
        session = GameSession(SpaceInvadersConfig(seed=1))
        assert session.state == GameState.RUNNING
        assert session.instruction == Instruction.NONE
        assert session.shoot is False

    def test_keys_set_pending_input(self):
        session = GameSession(SpaceInvadersConfig(seed=1))
        session.press("ArrowLeft")
        assert session.instruction == Instruction.MOVE_LEFT
        session.press("ArrowRight")
        assert session.instruction == Instruction.MOVE_RIGHT
        session.press(" ")
        assert session.shoot is True

    def test_unknown_keys_ignored(self):
        session = GameSession(SpaceInvadersConfig(seed=1))
        session.press("q")
        session.press("Enter")
        assert session.instruction == Instruction.NONE
        assert session.shoot is False

    def test_tick_consumes_input(self):
        session = GameSession(SpaceInvadersConfig(seed=1))
        start = session.play_field.cannon.position.x
        session.press("ArrowLeft")
        session.press(" ")

        assert session.tick() in (True, False)

        assert session.play_field.cannon.position.x == start - 1
        assert any(not b.is_alien_bullet() for b in session.play_field.bullets)
        assert session.instruction == Instruction.NONE
        assert session.shoot is False

    def test_pause_stops_ticks(self):
        session = GameSession(SpaceInvadersConfig(seed=1))
        session.toggle_pause()
        assert session.state == GameState.PAUSED

        session.press("ArrowLeft")
        start = session.play_field.cannon.position.x
        assert session.tick() is None
        assert session.play_field.cannon.position.x == start

        session.toggle_pause()
        assert session.state == GameState.RUNNING

    def test_reset_waits_for_start(self):
        session = GameSession(SpaceInvadersConfig(seed=1))
        session.press(" ")
        session.tick()
        old_field = session.play_field

        session.reset()

        assert session.state == GameState.NONE
        assert session.play_field is not old_field
        assert session.play_field.bullets == ()
        assert session.tick() is None

        # Pause has no effect before the game has started
        session.toggle_pause()
        assert session.state == GameState.NONE

        session.start()
        assert session.state == GameState.RUNNING
        assert session.tick() is not None

    def test_tick_interval_scales_with_speed(self):
        assert GameSession(SpaceInvadersConfig()).tick_interval_ms == 34
        assert GameSession(SpaceInvadersConfig(speed=2)).tick_interval_ms == 17
