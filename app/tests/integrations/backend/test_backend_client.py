from unittest.mock import patch

from integrations.backend import client as backend_client


def test_is_backend_configured(settings_factory):
    assert backend_client.is_backend_configured(settings_factory()) is False
    assert (
        backend_client.is_backend_configured(
            settings_factory(supabase_url="https://p.supabase.co", supabase_key="k")
        )
        is True
    )


@patch("integrations.backend.client.create_client")
@patch("integrations.backend.client.logger")
def test_build_backend_client_demo_mode(mock_logger, mock_create_client, settings_factory):
    assert backend_client.build_backend_client(settings_factory()) is None

    mock_create_client.assert_not_called()
    mock_logger.warning.assert_called_once_with(
        "backend_not_configured", has_url=False, has_key=False, mode="demo"
    )


@patch("integrations.backend.client.create_client")
def test_build_backend_client(mock_create_client, settings_factory):
    settings = settings_factory(
        supabase_url="https://project.supabase.co", supabase_key="anon-key"
    )

    client = backend_client.build_backend_client(settings)

    assert client is mock_create_client.return_value
    mock_create_client.assert_called_once_with("https://project.supabase.co", "anon-key")


@patch("integrations.backend.client.create_client")
def test_get_backend_client_is_cached(mock_create_client, monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.co")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key")

    first = backend_client.get_backend_client()
    second = backend_client.get_backend_client()

    assert first is second
    mock_create_client.assert_called_once()
