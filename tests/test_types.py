import pytest

from stripetypes.types import (
    ApiVersion,
    DelayDays,
    DelayDaysOther,
    OffSessionOther,
    PaymentIntentOffSession,
    Scheduled,
    ScheduledOther,
    UpTo,
    UpToOther,
)


def test_api_version_value_and_str():
    assert ApiVersion.V2023_08_16.value == "2023-08-16"
    assert str(ApiVersion.V2011_01_01) == "2011-01-01"
    assert ApiVersion("2020-08-27") is ApiVersion.V2020_08_27


def test_api_versions_are_in_date_order_and_unique():
    values = [v.value for v in ApiVersion]
    assert values == sorted(values)
    assert len(set(values)) == len(values)
    assert [ApiVersion(value) for value in values] == list(ApiVersion)


def test_api_version_member_names_match_dates():
    for version in ApiVersion:
        assert ApiVersion(version.value) is version
        assert version.name == "V" + version.value.replace("-", "_")


def test_unknown_api_version_rejected():
    with pytest.raises(ValueError):
        ApiVersion("1999-01-01")


def test_delay_days_roundtrip():
    d = DelayDays.days(7)
    assert d.to_json() == 7
    assert DelayDays.from_json(d.to_json()) == d


def test_delay_days_minimum():
    m = DelayDays.minimum()
    assert m.value is DelayDaysOther.MINIMUM
    assert m.to_json() == "minimum"
    assert DelayDays.from_json("minimum") == m


@pytest.mark.parametrize("bad", [-1, 2**32, "maximum", True, 1.5, None])
def test_delay_days_invalid(bad):
    with pytest.raises(ValueError):
        DelayDays.from_json(bad)


def test_scheduled_roundtrip():
    s = Scheduled.at(1700000000)
    assert s.to_json() == 1700000000
    assert Scheduled.from_json(1700000000) == s
    assert Scheduled.now().to_json() == "now"
    assert Scheduled.from_json("now").value is ScheduledOther.NOW


def test_scheduled_invalid():
    with pytest.raises(ValueError):
        Scheduled.from_json("later")
    with pytest.raises(ValueError):
        Scheduled.from_json(2**63)


def test_up_to_roundtrip():
    u = UpTo.max(1000)
    assert u.to_json() == 1000
    assert UpTo.from_json(1000) == u
    inf = UpTo.now()
    assert inf.value is UpToOther.INF
    assert inf.to_json() == "inf"
    assert UpTo.from_json("inf") == inf


def test_up_to_invalid():
    with pytest.raises(ValueError):
        UpTo.max(-5)
    with pytest.raises(ValueError):
        UpTo.from_json("infinity")


def test_off_session_exists():
    o = PaymentIntentOffSession.exists(True)
    assert o.to_json() is True
    assert PaymentIntentOffSession.from_json(False) == PaymentIntentOffSession.exists(False)


@pytest.mark.parametrize("freq", list(OffSessionOther))
def test_off_session_frequency_roundtrip(freq):
    o = PaymentIntentOffSession.frequency(freq)
    assert o.value is freq
    assert PaymentIntentOffSession.from_json(o.to_json()) == o


def test_off_session_wire_values():
    assert PaymentIntentOffSession.frequency(OffSessionOther.ONE_OFF).to_json() == "one_off"
    assert PaymentIntentOffSession.frequency(OffSessionOther.RECURRING).to_json() == "recurring"


def test_off_session_invalid():
    with pytest.raises(ValueError):
        PaymentIntentOffSession.from_json(1)
    with pytest.raises(ValueError):
        PaymentIntentOffSession.from_json("sometimes")