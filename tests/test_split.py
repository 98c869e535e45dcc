import random

import pytest

from pytweetsplit import ConfigurationError, ThreadPipeline, split
from pytweetsplit.pipeline_config import PipelineConfig
from pytweetsplit.prefix import format_prefix, prefix_size, reconstruct, strip_prefix


def test_short_input_is_a_single_post():
    assert split("hello world") == ["hello world"]


def test_empty_input_is_a_single_empty_post():
    assert split("") == [""]


def test_two_posts_with_single_digit_prefixes():
    text = " ".join(["abcd"] * 40)

    posts = split(text)

    assert posts == [
        "(1/2)" + " ".join(["abcd"] * 27),
        "(2/2)" + " ".join(["abcd"] * 13),
    ]
    assert all(len(post) <= 140 for post in posts)


def test_oversized_word_is_broken_without_inserting_a_space():
    text = "a " + "b" * 300 + " c"

    posts = split(text)

    assert posts == [
        "(1/3)a " + "b" * 133,
        "(2/3)" + "b" * 135,
        "(3/3)" + "b" * 32 + " c",
    ]
    result = ThreadPipeline().run(text)
    assert [post.breaks_word for post in result.posts] == [True, True, False]
    assert reconstruct(result.posts) == text


def test_ten_posts_widen_the_prefix():
    posts = split("x" * 1300)

    assert len(posts) == 10
    assert [strip_prefix(post)[:2] for post in posts] == [
        (n, 10) for n in range(1, 11)
    ]
    assert posts[0] == "(1/10)" + "x" * 134
    assert posts[-1] == "(10/10)" + "x" * 94
    assert all(len(post) <= 140 for post in posts)


def test_limit_too_small_for_prefix_raises():
    with pytest.raises(ConfigurationError, match="prefix does not fit"):
        split("x" * 50, limit=5)


def test_non_positive_limit_is_rejected():
    with pytest.raises(ConfigurationError, match="positive"):
        split("hello", limit=0)


def test_line_breaks_are_stripped_before_splitting():
    assert split("hello\nworld") == ["helloworld"]


def test_custom_limit():
    text = "one two three four five six"

    posts = split(text, limit=12)

    assert posts == [
        "(1/5)one two",
        "(2/5)three",
        "(3/5)four",
        "(4/5)five",
        "(5/5)six",
    ]
    result = ThreadPipeline(PipelineConfig(limit=12)).run(text)
    assert reconstruct(result.posts) == text


def _random_text(rng: random.Random) -> str:
    words = []
    for _ in range(rng.randint(0, 400)):
        length = rng.choice([1, 2, 3, 5, 8, 13, 40, 150, 300])
        words.append("".join(rng.choice("abcxyz.,!?") for _ in range(length)))
    separators = [rng.choice([" ", " ", " ", "  "]) for _ in words]
    return "".join(word + sep for word, sep in zip(words, separators))


@pytest.mark.parametrize("limit", [20, 50, 140, 280])
@pytest.mark.parametrize("seed", range(8))
def test_posts_respect_limit_prefixes_and_word_order(limit, seed):
    rng = random.Random(seed * 1000 + limit)
    text = _random_text(rng)

    result = ThreadPipeline(PipelineConfig(limit=limit)).run(text)
    posts = result.posts
    total = len(posts)

    assert all(len(post.text) <= limit for post in posts)
    if total == 1:
        assert posts[0].text == posts[0].body
    else:
        for n, post in enumerate(posts, start=1):
            assert strip_prefix(post.text) == (n, total, post.body)
            assert post.prefix == format_prefix(n, total)

    expected = " ".join(word for word in text.split(" ") if word)
    if len(text) <= limit:
        assert posts[0].text == text
    else:
        assert reconstruct(posts) == expected


def test_strip_prefix_leaves_unprefixed_text_alone():
    assert strip_prefix("hello") == (None, None, "hello")
    assert strip_prefix("(0/2)hello") == (None, None, "(0/2)hello")
    assert strip_prefix("(3/12)hello") == (3, 12, "hello")


def test_prefix_size_reserves_denominator_width():
    assert prefix_size(1, 1) == 5
    assert prefix_size(9, 2) == 6
    assert prefix_size(10, 2) == 7
