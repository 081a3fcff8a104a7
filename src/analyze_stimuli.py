"""
Summarize generated stimulus lists.

Key checks:
1. Trials and conditions per list
2. Trigger ranges per list
3. Word durations by slot
"""

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt
import seaborn as sns

from config import OUTPUT_DIR, RESULTS_DIR, MAX_WORDS
from output import TASK_NAME


def load_lists(output_dir=OUTPUT_DIR) -> pd.DataFrame:
    """Load every written list as one DataFrame."""
    paths = sorted(Path(output_dir).glob(f"*{TASK_NAME}*.csv"))

    if not paths:
        raise FileNotFoundError("No stimulus lists found. Run generate_dom_stimuli.py first.")

    return pd.concat(
        [pd.read_csv(p, dtype=str, keep_default_na=False) for p in paths],
        ignore_index=True
    )


def summarize_lists(df: pd.DataFrame) -> pd.DataFrame:
    """Trials, conditions and trigger ranges per language and list."""
    df = df[df["list"] != ""].copy()
    df["target_word_trigger"] = df["target_word_trigger"].astype(int)
    df["sentence_trigger"] = df["sentence_trigger"].astype(int)

    summary = df.groupby(["language", "list"], sort=False).agg(
        n_trials=("sentence", "count"),
        n_sentences=("sentence", "nunique"),
        target_trigger_min=("target_word_trigger", "min"),
        target_trigger_max=("target_word_trigger", "max"),
        sentence_trigger_min=("sentence_trigger", "min"),
        sentence_trigger_max=("sentence_trigger", "max"),
    )
    conditions = (
        df.groupby(["language", "list", "grammaticality"], sort=False)
        .size()
        .unstack(fill_value=0)
    )
    return summary.join(conditions).reset_index()


def long_durations(df: pd.DataFrame) -> pd.DataFrame:
    """One row per presented word: slot, word, duration."""
    frames = []
    for n in range(1, MAX_WORDS + 1):
        slot = df[[f"word{n}", f"word{n}_duration"]]
        slot = slot[slot[f"word{n}"] != ""]
        frames.append(pd.DataFrame({
            "slot": n,
            "word": slot[f"word{n}"],
            "duration": slot[f"word{n}_duration"].astype(int),
        }))
    return pd.concat(frames, ignore_index=True)


def duration_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Mean, min and max duration (ms) per word slot."""
    return long_durations(df).groupby("slot").agg(
        n_words=("duration", "count"),
        mean_ms=("duration", "mean"),
        min_ms=("duration", "min"),
        max_ms=("duration", "max"),
    ).reset_index()


def plot_word_durations(df: pd.DataFrame, output_path: Path):
    """Box plot of word durations per slot."""
    fig, ax = plt.subplots(figsize=(10, 5))

    sns.boxplot(data=long_durations(df), x="slot", y="duration", color="#2E86AB", ax=ax)

    ax.set_xlabel("Word position", fontsize=12)
    ax.set_ylabel("Duration (ms)", fontsize=12)
    ax.set_title("Word presentation durations", fontsize=14)

    plt.tight_layout()
    plt.savefig(output_path, dpi=150)
    print(f"Saved plot: {output_path}")
    plt.close(fig)


def main():
    """Print summaries and save the duration plot."""
    Path(RESULTS_DIR).mkdir(exist_ok=True)

    print("Loading lists...")
    df = load_lists()
    print(f"Loaded {len(df)} trials")

    print("\n" + "=" * 50)
    print("LISTS")
    print("=" * 50)
    print(summarize_lists(df).to_string(index=False))

    print("\n" + "=" * 50)
    print("WORD DURATIONS")
    print("=" * 50)
    durations = duration_summary(df)
    print(durations.to_string(index=False))
    durations.to_csv(Path(RESULTS_DIR) / "duration_summary.csv", index=False)

    plot_word_durations(df, Path(RESULTS_DIR) / "word_durations.png")


if __name__ == "__main__":
    main()
