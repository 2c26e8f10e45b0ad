from unittest import mock

import pytest

from esmapping import elastic_connection as ec


@pytest.fixture()
def fake_elasticsearch(settings_env):
    ec.elastic_connection.cache_clear()
    with mock.patch.object(ec, "Elasticsearch") as cls:
        yield cls
    ec.elastic_connection.cache_clear()


def test_connect(fake_elasticsearch):
    fake_elasticsearch.return_value.ping.return_value = True
    assert ec.elastic_connection() is fake_elasticsearch.return_value
    assert ec.elastic_connection() is fake_elasticsearch.return_value
    fake_elasticsearch.assert_called_once_with("http://localhost:9200")


def test_connect_with_password(fake_elasticsearch, settings_env):
    settings_env.setenv("ESMAPPING_ELASTIC_PASSWORD", "secret")
    fake_elasticsearch.return_value.ping.return_value = True
    ec.elastic_connection()
    fake_elasticsearch.assert_called_once_with(
        "https://localhost:9200", basic_auth=("elastic", "secret"), verify_certs=False
    )


def test_cannot_connect(fake_elasticsearch):
    fake_elasticsearch.return_value.ping.return_value = False
    with pytest.raises(ec.CannotConnectElastic, match="http://localhost:9200"):
        ec.elastic_connection()


def test_connection_error_is_wrapped(fake_elasticsearch):
    fake_elasticsearch.return_value.ping.side_effect = ValueError("bad host")
    with pytest.raises(ec.CannotConnectElastic, match="bad host"):
        ec.elastic_connection()
