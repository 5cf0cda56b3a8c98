import pytest

from src.config import DEFAULT_SETTINGS, ReconciliationSettings, load_settings


def test_defaults_match_statutory_values():
    settings = load_settings({})

    assert settings == DEFAULT_SETTINGS
    assert settings.pf_rate == 0.12
    assert settings.pf_wage_ceiling == 15000
    assert settings.match_tolerance == 2
    assert settings.default_days_present == 22
    assert settings.restrict_to_month is False


def test_environment_overrides():
    settings = load_settings(
        {
            "CHALLAN_RECON_PF_RATE": "0.10",
            "CHALLAN_RECON_PF_WAGE_CEILING": "21000",
            "CHALLAN_RECON_MATCH_TOLERANCE": "5",
            "CHALLAN_RECON_DEFAULT_DAYS": "26",
            "CHALLAN_RECON_RESTRICT_TO_MONTH": "yes",
        }
    )

    assert settings == ReconciliationSettings(
        pf_rate=0.10,
        pf_wage_ceiling=21000.0,
        match_tolerance=5.0,
        default_days_present=26,
        restrict_to_month=True,
    )


def test_blank_values_keep_defaults():
    assert load_settings({"CHALLAN_RECON_PF_RATE": "  "}).pf_rate == 0.12


@pytest.mark.parametrize(
    "name, value",
    [
        ("CHALLAN_RECON_PF_RATE", "twelve"),
        ("CHALLAN_RECON_DEFAULT_DAYS", "22.5"),
        ("CHALLAN_RECON_RESTRICT_TO_MONTH", "maybe"),
    ],
)
def test_invalid_values_name_the_variable(name, value):
    with pytest.raises(ValueError, match=name):
        load_settings({name: value})


@pytest.mark.parametrize(
    "name, value",
    [
        ("CHALLAN_RECON_PF_RATE", "nan"),
        ("CHALLAN_RECON_PF_RATE", "inf"),
        ("CHALLAN_RECON_PF_RATE", "-0.12"),
        ("CHALLAN_RECON_PF_WAGE_CEILING", "-15000"),
        ("CHALLAN_RECON_PF_WAGE_CEILING", "inf"),
        ("CHALLAN_RECON_MATCH_TOLERANCE", "nan"),
        ("CHALLAN_RECON_MATCH_TOLERANCE", "-1"),
        ("CHALLAN_RECON_DEFAULT_DAYS", "0"),
        ("CHALLAN_RECON_DEFAULT_DAYS", "-5"),
    ],
)
def test_non_finite_or_out_of_range_values_are_rejected(name, value):
    with pytest.raises(ValueError, match=name):
        load_settings({name: value})


def test_zero_tolerance_is_allowed():
    assert load_settings({"CHALLAN_RECON_MATCH_TOLERANCE": "0"}).match_tolerance == 0.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"pf_rate": float("nan")},
        {"pf_wage_ceiling": float("inf")},
        {"match_tolerance": -2},
        {"default_days_present": 0},
    ],
)
def test_settings_built_in_code_are_validated(kwargs):
    with pytest.raises(ValueError):
        ReconciliationSettings(**kwargs)
