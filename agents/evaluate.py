"""
Evaluation script for scripted policies on the starship environment
"""

import argparse
import csv
import os
from typing import Optional

import numpy as np

from starship import StarshipEnv
from starship.configs import ENV_CONFIG

from .policies import make_policy


def evaluate_policy(
    policy_name: str = "dodge",
    n_episodes: int = 10,
    render: bool = False,
    seed: Optional[int] = None,
    max_steps: Optional[int] = None,
    csv_path: Optional[str] = None,
):
    """
    Evaluate a scripted policy

    Args:
        policy_name: 'random' or 'dodge'
        n_episodes: Number of episodes to evaluate
        render: Whether to render in an arcade window
        seed: Random seed; episode i is reset with seed + i
        max_steps: Episode length cap (default from ENV_CONFIG)
        csv_path: Optional path for per-episode results
    """
    env_kwargs = dict(ENV_CONFIG)
    if max_steps is not None:
        env_kwargs["max_steps"] = max_steps
    env = StarshipEnv(render_mode="human" if render else None, **env_kwargs)
    policy = make_policy(policy_name, env, seed=seed)

    episode_rewards = []
    episode_lengths = []
    episode_scores = []

    for episode in range(n_episodes):
        obs, info = env.reset(seed=seed + episode if seed is not None else None)

        terminated = False
        truncated = False
        total_reward = 0.0
        steps = 0

        while not (terminated or truncated):
            action = policy(obs)
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += reward
            steps += 1

        episode_rewards.append(total_reward)
        episode_lengths.append(steps)
        episode_scores.append(info["score"])

        print(f"Episode {episode + 1}/{n_episodes}: "
              f"Reward = {total_reward:.2f}, Length = {steps}, Score = {info['score']}")

    env.close()

    mean_reward = np.mean(episode_rewards)
    std_reward = np.std(episode_rewards)
    mean_length = np.mean(episode_lengths)
    mean_score = np.mean(episode_scores)

    print("\n" + "=" * 50)
    print(f"Evaluation Results: {policy_name} ({n_episodes} episodes)")
    print(f"Mean Reward: {mean_reward:.2f} ± {std_reward:.2f}")
    print(f"Mean Episode Length: {mean_length:.1f}")
    print(f"Mean Score: {mean_score:.1f}")
    print(f"Max Score: {np.max(episode_scores)}")
    print("=" * 50)

    if csv_path:
        directory = os.path.dirname(csv_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(csv_path, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(["episode", "reward", "length", "score"])
            for i, row in enumerate(zip(episode_rewards, episode_lengths, episode_scores)):
                writer.writerow([i + 1, *row])
        print(f"Results saved to {csv_path}")

    return {
        "mean_reward": mean_reward,
        "std_reward": std_reward,
        "mean_length": mean_length,
        "mean_score": mean_score,
        "episode_rewards": episode_rewards,
        "episode_lengths": episode_lengths,
        "episode_scores": episode_scores,
    }


def main():
    parser = argparse.ArgumentParser(description="Evaluate a scripted starship policy")
    parser.add_argument(
        "--policy",
        type=str,
        default="dodge",
        choices=["random", "dodge"],
        help="Policy to evaluate (default: dodge)",
    )
    parser.add_argument(
        "--n-episodes",
        type=int,
        default=10,
        help="Number of evaluation episodes (default: 10)",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Show episodes in a window",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed (default: 42)",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help=f"Episode length cap (default: {ENV_CONFIG['max_steps']})",
    )
    parser.add_argument(
        "--csv",
        type=str,
        default=None,
        help="Write per-episode results to this CSV file",
    )
    parser.add_argument(
        "--compare-random",
        action="store_true",
        help="Also evaluate the random policy for comparison",
    )

    args = parser.parse_args()

    results = evaluate_policy(
        policy_name=args.policy,
        n_episodes=args.n_episodes,
        render=args.render,
        seed=args.seed,
        max_steps=args.max_steps,
        csv_path=args.csv,
    )

    if args.compare_random and args.policy != "random":
        print("\n")
        random_results = evaluate_policy(
            policy_name="random",
            n_episodes=args.n_episodes,
            seed=args.seed,
            max_steps=args.max_steps,
        )

        improvement = results["mean_score"] - random_results["mean_score"]
        print(f"\nScore improvement over random: {improvement:.1f}")


if __name__ == "__main__":
    main()
