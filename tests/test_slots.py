"""Tests for slot usage in adaptchain classes."""

import adaptchain as ac


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(ac.Iter(()))
    assert _check_slots(ac.Seq(()))
    assert _check_slots(ac.Stride((), 1))
    assert _check_slots(ac.Some(42))
    assert _check_slots(ac.NoneOption())
    assert _check_slots(ac.get_config())
    seq = ac.Seq([1, 2, 2])
    assert _check_slots(seq.fn_map(str))
    assert _check_slots(seq.step(1))
    assert _check_slots(seq.put_back())
    assert _check_slots(seq.interleave([1]))
    assert _check_slots(seq.dedup())
    assert _check_slots(seq.multipeek())
    assert _check_slots(seq.merge([1]))
    assert _check_slots(seq.batching(lambda src: src.pull()))
    assert _check_slots(seq.product([1]))
    groups = ac.Seq([1]).group_by(lambda x: x)
    assert _check_slots(groups)
    assert _check_slots(groups.pull().unwrap()[1])
