"""Randomized structural tests for StringQueue."""

import random

from strqueue import StringQueue


def _assert_structure(queue: StringQueue) -> None:
    """Walking from head reaches tail in size() nodes and tail ends the chain."""
    lst = queue._list
    if queue.size() == 0:
        assert lst.head is None
        assert lst.tail is None
        return
    node = lst.head
    for _ in range(queue.size() - 1):
        assert node is not None
        node = node.next
    assert node is lst.tail
    assert node is not None and node.next is None


def _random_word(rng: random.Random) -> str:
    return "".join(rng.choice("abcAB") for _ in range(rng.randint(0, 4)))


def test_random_operations_keep_structure() -> None:
    """Test the structural invariant and size after every call."""
    rng = random.Random(1234)
    queue = StringQueue()
    model: list[bytes] = []
    buf = bytearray(8)

    for _ in range(2000):
        op = rng.choice(["head", "tail", "remove", "reverse", "sort"])
        if op == "head":
            word = _random_word(rng)
            assert queue.insert_head(word)
            model.insert(0, word.encode())
        elif op == "tail":
            word = _random_word(rng)
            assert queue.insert_tail(word)
            model.append(word.encode())
        elif op == "remove":
            removed = queue.remove_head(buf)
            assert removed == bool(model)
            if removed:
                expected = model.pop(0)
                assert bytes(buf[: buf.index(0)]) == expected[:7]
        elif op == "reverse":
            queue.reverse()
            model.reverse()
        else:
            queue.sort()
            model.sort()

        assert queue.size() == len(model)
        assert list(queue) == model
        _assert_structure(queue)


def test_random_sort_matches_stable_sort() -> None:
    """Test sort against the built-in stable sort for random inputs."""
    rng = random.Random(42)
    for length in range(0, 40):
        words = [_random_word(rng) for _ in range(length)]
        queue = StringQueue()
        for word in words:
            queue.insert_tail(word)

        queue.sort()
        assert queue.to_list() == sorted(words, key=str.encode)
        _assert_structure(queue)

        queue.sort()
        assert queue.to_list() == sorted(words, key=str.encode)


def test_random_reverse_is_involution() -> None:
    """Test reverse twice restores any sequence."""
    rng = random.Random(7)
    for length in range(0, 20):
        words = [_random_word(rng) for _ in range(length)]
        queue = StringQueue()
        for word in words:
            queue.insert_tail(word)

        queue.reverse()
        assert queue.to_list() == words[::-1]
        _assert_structure(queue)
        queue.reverse()
        assert queue.to_list() == words
        _assert_structure(queue)
