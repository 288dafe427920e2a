import pytest

from share_recovery.dataset import parse_dataset
from share_recovery.errors import (
    DatasetFormatError,
    InconsistentShares,
    InsufficientShares,
    InvalidBase,
    InvalidDigit,
)
from share_recovery.interpolation import Share
from share_recovery.policy import RecoveryPolicy
from share_recovery.recovery import recover, recover_files, recover_outcome, select_shares


def test_recover_sample(sample_document):
    assert recover(parse_dataset(sample_document, "sample"), policy=RecoveryPolicy()) == 3


def test_recover_mixed_bases():
    document = {
        "keys": {"n": 3, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "1000"},
        "3": {"base": "16", "value": "e"},
    }
    assert recover(parse_dataset(document, "mixed"), policy=RecoveryPolicy()) == 2


def test_select_first_shares(sample_document):
    shares = select_shares(parse_dataset(sample_document, "sample"))
    assert shares == [Share(1, 4), Share(2, 7), Share(3, 12)]


def test_select_first_requires_leading_indices(sample_document):
    del sample_document["2"]
    with pytest.raises(InsufficientShares) as exc:
        select_shares(parse_dataset(sample_document, "gap"))
    assert (exc.value.required, exc.value.available) == (3, 2)


def test_select_any_skips_undecodable(sample_document, caplog):
    sample_document["1"] = {"base": "2", "value": "12"}
    dataset = parse_dataset(sample_document, "skip")
    with pytest.raises(InvalidDigit):
        select_shares(dataset, selection="first")
    shares = select_shares(dataset, selection="any")
    assert [s.x for s in shares] == [2, 3, 6]
    assert "skipping share 1" in caplog.text
    assert recover(dataset, policy=RecoveryPolicy(selection="any")) == 3


def test_select_any_runs_out(sample_document):
    sample_document["2"] = {"base": "99", "value": "1"}
    sample_document["3"] = {"base": "10", "value": "x"}
    with pytest.raises(InsufficientShares) as exc:
        select_shares(parse_dataset(sample_document, "short"), selection="any")
    assert exc.value.available == 2


def test_select_rejects_unknown_mode(sample_document):
    with pytest.raises(ValueError):
        select_shares(parse_dataset(sample_document, "sample"), selection="random")


def test_threshold_limit(sample_document):
    with pytest.raises(InsufficientShares):
        select_shares(parse_dataset(sample_document, "sample"), max_threshold=2)


def test_invalid_base_propagates(sample_document):
    sample_document["1"]["base"] = "1"
    with pytest.raises(InvalidBase):
        recover(parse_dataset(sample_document, "base"), policy=RecoveryPolicy())


def test_verify_surplus(sample_document):
    strict = RecoveryPolicy(verify_surplus=True)
    assert recover(parse_dataset(sample_document, "sample"), policy=strict) == 3

    sample_document["6"]["value"] = "212"
    with pytest.raises(InconsistentShares) as exc:
        recover(parse_dataset(sample_document, "tampered"), policy=strict)
    assert exc.value.indices == (6,)


def test_recover_without_reduction(sample_document):
    loose = RecoveryPolicy(reduce_fractions=False, verify_surplus=True)
    assert recover(parse_dataset(sample_document, "sample"), policy=loose) == 3


def test_recover_outcome(sample_document):
    ok = recover_outcome(parse_dataset(sample_document, "sample"), policy=RecoveryPolicy())
    assert ok.ok and ok.secret == 3 and ok.kind is None

    # Abscissae 2, 3, 6 give the share at x=2 a weight of 9/2.
    del sample_document["1"]
    sample_document["2"]["value"] = "110"
    failed = recover_outcome(
        parse_dataset(sample_document, "bad"), policy=RecoveryPolicy(selection="any")
    )
    assert not failed.ok
    assert failed.secret is None
    assert failed.kind == "InconsistentShares"


def test_recover_files_isolates_failures(tmp_path, write_dataset, sample_document):
    good = write_dataset("good.json", sample_document)
    broken = tmp_path / "broken.json"
    broken.write_text("not json", encoding="utf-8")
    missing = tmp_path / "missing.json"
    short = write_dataset("short.json", {"keys": {"k": 2}, "1": {"base": "10", "value": "1"}})
    odd = write_dataset("odd.json", {"keys": {"k": 1}, "\u00b2": {"base": "10", "value": "1"}})

    outcomes = recover_files([broken, good, missing, short, odd], policy=RecoveryPolicy())

    assert [o.label for o in outcomes] == [str(broken), str(good), str(missing), str(short), str(odd)]
    assert [o.kind for o in outcomes] == [
        "DatasetFormatError",
        None,
        "DatasetFormatError",
        "InsufficientShares",
        "DatasetFormatError",
    ]
    assert isinstance(outcomes[0].error, DatasetFormatError)
    assert outcomes[1].secret == 3
