import importlib

from share_recovery.policy import RecoveryPolicy


def test_policy_env_overrides(monkeypatch):
    monkeypatch.setenv("SHARE_RECOVERY_SELECTION", "ANY")
    monkeypatch.setenv("SHARE_RECOVERY_REDUCE", "off")
    monkeypatch.setenv("SHARE_RECOVERY_VERIFY", "1")
    monkeypatch.setenv("SHARE_RECOVERY_MAX_K", "64")
    monkeypatch.setenv("SHARE_RECOVERY_LOG_LEVEL", "debug")

    policy_module = importlib.import_module("share_recovery.policy")
    reloaded = importlib.reload(policy_module)

    try:
        policy = reloaded.policy
        assert policy.selection == "any"
        assert policy.reduce_fractions is False
        assert policy.verify_surplus is True
        assert policy.max_threshold == 64
        assert policy.log_level == "DEBUG"
    finally:
        for name in (
            "SHARE_RECOVERY_SELECTION",
            "SHARE_RECOVERY_REDUCE",
            "SHARE_RECOVERY_VERIFY",
            "SHARE_RECOVERY_MAX_K",
            "SHARE_RECOVERY_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)
        importlib.reload(policy_module)


def test_policy_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("SHARE_RECOVERY_SELECTION", "random")
    monkeypatch.setenv("SHARE_RECOVERY_REDUCE", "maybe")
    monkeypatch.setenv("SHARE_RECOVERY_MAX_K", "lots")
    monkeypatch.setenv("SHARE_RECOVERY_LOG_LEVEL", "loud")

    from share_recovery.policy import RecoveryPolicy as Current, load_policy

    assert load_policy() == Current()


def test_with_overrides_skips_none():
    base = RecoveryPolicy()
    changed = base.with_overrides(selection="any", verify_surplus=None, reduce_fractions=False)
    assert changed.selection == "any"
    assert changed.verify_surplus is False
    assert changed.reduce_fractions is False
    assert base.selection == "first"
