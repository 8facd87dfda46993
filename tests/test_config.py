"""Configuration invariants: phone formats, email shape, endpoint, strict flag."""
import pytest
from pydantic import ValidationError

from homecare_site.config import Settings, site_config
from homecare_site.schemas import SiteConfig

VALID = {
    "business_name": "Deddeh & Tyler Homecare",
    "phone_tel": "+12536914318",
    "display_phone": "(253) 691-4318",
    "intake_email": "deddeh@deddehtylerhomecare.com",
    "relay_endpoint": "https://formspree.io/f/mwvnlrwq",
    "skilled_clinical_services": False,
}


def make(**overrides):
    return SiteConfig(**{**VALID, **overrides})


class TestSiteConfigInvariants:
    """Each invariant checked independently."""

    def test_valid_config(self):
        cfg = make()
        assert cfg.business_name == "Deddeh & Tyler Homecare"
        assert cfg.tel_href == "tel:+12536914318"
        assert cfg.intake_subject == "New Client Intake Request — Deddeh & Tyler Homecare"

    def test_loaded_config_is_valid(self):
        assert site_config.business_name
        assert site_config.phone_tel.startswith("+1")
        assert isinstance(site_config.skilled_clinical_services, bool)

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_business_name(self, name):
        with pytest.raises(ValidationError):
            make(business_name=name)

    @pytest.mark.parametrize(
        "tel",
        [
            "2536914318",
            "+4420794601",
            "+1253691431",
            "+1253691431x",
            "+1 253 691 4318",
            "+12536914318\n",
        ],
    )
    def test_phone_tel_must_be_plus_one_and_ten_digits(self, tel):
        with pytest.raises(ValidationError) as exc_info:
            make(phone_tel=tel)
        assert "+1" in str(exc_info.value)

    @pytest.mark.parametrize(
        "display",
        [
            "253-691-4318",
            "(253)691-4318",
            "(253) 691 4318",
            "",
            "(253) 691-4318\n",
        ],
    )
    def test_display_phone_pattern(self, display):
        with pytest.raises(ValidationError):
            make(display_phone=display)

    @pytest.mark.parametrize(
        "email",
        [
            "deddeh",
            "deddeh@",
            "@example.com",
            "a@b@c.com",
            "a@example",
            "a b@example.com",
            "a@b.com\n",
        ],
    )
    def test_email_shape(self, email):
        with pytest.raises(ValidationError):
            make(intake_email=email)

    @pytest.mark.parametrize(
        "endpoint",
        [
            "http://formspree.io/f/abc",
            "formspree.io/f/abc",
            "https://",
            "",
            "https://formspree.io:abc/f/x",
            "https://formspree.io/f/\x00x",
        ],
    )
    def test_endpoint_must_be_https(self, endpoint):
        with pytest.raises(ValidationError):
            make(relay_endpoint=endpoint)

    @pytest.mark.parametrize("flag", [1, "true", "yes", None])
    def test_clinical_flag_is_strictly_boolean(self, flag):
        with pytest.raises(ValidationError):
            make(skilled_clinical_services=flag)

    def test_config_is_immutable(self):
        cfg = make()
        with pytest.raises(ValidationError):
            cfg.business_name = "Other"


class TestSettings:
    """Environment loading."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("INTAKE_RELAY_ENDPOINT", raising=False)
        cfg = Settings().site_config()
        assert cfg.display_phone == "(253) 691-4318"
        assert cfg.relay_endpoint == "https://formspree.io/f/mwvnlrwq"
        assert cfg.skilled_clinical_services is False

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("BUSINESS_NAME", "Sunrise Care")
        monkeypatch.setenv("SKILLED_CLINICAL_SERVICES", "true")
        cfg = Settings().site_config()
        assert cfg.business_name == "Sunrise Care"
        assert cfg.skilled_clinical_services is True

    def test_invalid_env_rejected_at_load(self, monkeypatch):
        monkeypatch.setenv("PHONE_TEL", "253-691-4318")
        with pytest.raises(ValidationError):
            Settings().site_config()
