#!/usr/bin/env python3
"""
Demonstrate splitting texts of different sizes into numbered posts.

This example runs four inputs through ThreadPipeline: one that fits a single
post, one that needs two posts, a long passage that needs a wider ``(n/dd)``
prefix, and a text with a word too long for any post.

Usage:
    python examples/thread_demo.py
"""

from pytweetsplit import PipelineConfig, ThreadPipeline
from pytweetsplit.prefix import reconstruct

ALICE = (
    "Alice was beginning to get very tired of sitting by her sister on the "
    "bank, and of having nothing to do: once or twice she had peeped into the "
    "book her sister was reading, but it had no pictures or conversations in "
    "it, 'and what is the use of a book,' thought Alice 'without pictures or "
    "conversations?' So she was considering in her own mind (as well as she "
    "could, for the hot day made her feel very sleepy and stupid), whether "
    "the pleasure of making a daisy-chain would be worth the trouble of "
    "getting up and picking the daisies, when suddenly a White Rabbit with "
    "pink eyes ran close by her."
)

SAMPLES = {
    "short": "Just setting up my account.",
    "two_posts": ALICE[:250],
    "alice": " ".join([ALICE] * 4),
    "huge_word": "Supercali" + "fragilistic" * 20 + "expialidocious is long.",
}


def main():
    """Split every sample and print the posts with their lengths."""
    pipe = ThreadPipeline(PipelineConfig(return_trace=True))

    for name, text in SAMPLES.items():
        print("=" * 70)
        print(f"Sample: {name} ({len(text)} characters)")
        print("=" * 70)

        res = pipe.run(text)
        for post in res.posts:
            print(f">{post.text}")
            print(f"  {len(post.text)} chars")

        passes = [event for event in res.trace.events if event.name == "pack"]
        print()
        print(f"Posts: {len(res)}  packing passes: {len(passes)}")
        print(f"Round trip OK: {reconstruct(res.posts) == text}")
        print()


if __name__ == "__main__":
    main()
