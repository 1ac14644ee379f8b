import dataclasses

import pytest

from janrain import ConfigurationError, Credentials
from janrain.config import JanrainConfig, load_settings


def make_options(**overrides):
    base = dict(
        captureServerUrl="https://acme.us.janraincapture.com/",
        configurationServerUrl="https://v1.api.us.janrain.com/",
        cdnUrl="https://ssl-static.janraincapture.com/widget_data/flow.js",
        fullClientId="owner-id",
        fullClientSecret="owner-secret",
        loginClientId="login-id",
        loginClientSecret="login-secret",
        appId="app123",
    )
    base.update(overrides)
    return base


def test_load_settings_accepts_camel_case_options():
    cfg = load_settings(make_options(locale="fr-FR", flowName="mobile"))

    assert cfg.app_id == "app123"
    assert cfg.login_client_id == "login-id"
    assert cfg.locale == "fr-FR"
    assert cfg.flow_name == "mobile"


def test_load_settings_accepts_field_names():
    cfg = load_settings(dict(
        capture_server_url="https://acme.us.janraincapture.com",
        configuration_server_url="https://v1.api.us.janrain.com",
        cdn_url="https://cdn.example/flow.js",
        full_client_id="owner-id",
        full_client_secret="owner-secret",
        app_id="app123",
    ))

    assert cfg.full_credentials == Credentials("owner-id", "owner-secret")
    assert cfg.locale == "en-US"
    assert cfg.flow_name == "standard"
    assert cfg.request_timeout is None


def test_load_settings_ignores_unknown_options():
    cfg = load_settings(make_options(debug=True))

    assert not hasattr(cfg, "debug")


def test_load_settings_reports_every_missing_option():
    options = make_options()
    del options["appId"]
    options["fullClientSecret"] = ""

    with pytest.raises(ConfigurationError) as excinfo:
        load_settings(options)

    assert "full_client_secret" in str(excinfo.value)
    assert "app_id" in str(excinfo.value)


def test_load_settings_converts_request_timeout():
    cfg = load_settings(make_options(requestTimeout="7.5"))

    assert cfg.request_timeout == 7.5


def test_load_settings_rejects_invalid_request_timeout():
    with pytest.raises(ConfigurationError):
        load_settings(make_options(requestTimeout="soon"))


def test_server_urls_lose_trailing_slash_but_cdn_url_is_kept():
    cfg = load_settings(make_options(cdnUrl="https://cdn.example/flow.js/"))

    assert cfg.capture_server_url == "https://acme.us.janraincapture.com"
    assert cfg.configuration_server_url == "https://v1.api.us.janrain.com"
    assert cfg.cdn_url == "https://cdn.example/flow.js/"


def test_credentials_properties():
    cfg = load_settings(make_options())

    assert cfg.full_credentials == ("owner-id", "owner-secret")
    assert cfg.login_credentials.client_id == "login-id"
    assert cfg.login_credentials.client_secret == "login-secret"


def test_secrets_are_hidden_from_repr():
    text = repr(load_settings(make_options()))

    assert "owner-secret" not in text
    assert "login-secret" not in text


def test_config_is_immutable_and_overridable():
    cfg = load_settings(make_options())

    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.locale = "de-DE"

    other = cfg.with_overrides(locale="de-DE")
    assert isinstance(other, JanrainConfig)
    assert other.locale == "de-DE"
    assert cfg.locale == "en-US"
