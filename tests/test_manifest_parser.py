import pytest

from manifest_sieve.models import Document, Metadata
from manifest_sieve.models.errors import SchemaError
from manifest_sieve.utils.manifest_parser import extract_document


def test_extract_full_document():
    raw = {
        "apiVersion": "apps/v1",
        "kind": "Deployment",
        "metadata": {"name": "web", "namespace": "prod", "labels": {"app": "web"}, "uid": "123"},
        "spec": {"replicas": 1},
    }
    doc = extract_document(raw)
    assert doc == Document(
        api_version="apps/v1",
        kind="Deployment",
        metadata=Metadata(name="web", namespace="prod", labels={"app": "web"}),
    )
    # unknown keys stay in the raw mapping
    assert raw["metadata"]["uid"] == "123"
    assert raw["spec"] == {"replicas": 1}


def test_missing_fields_become_empty():
    doc = extract_document({"foo": "bar"})
    assert doc.api_version == ""
    assert doc.kind == ""
    assert doc.metadata == Metadata()


def test_null_metadata_is_zero_value():
    doc = extract_document({"kind": "ConfigMap", "metadata": None})
    assert doc.kind == "ConfigMap"
    assert doc.name == ""
    assert doc.labels == {}


@pytest.mark.parametrize(
    "raw",
    [
        {"metadata": ["not", "a", "map"]},
        {"metadata": "name"},
        {"metadata": {"labels": ["app"]}},
        {"metadata": {"name": 42}},
        {"kind": {"nested": True}},
    ],
)
def test_shape_mismatch_raises(raw):
    with pytest.raises(SchemaError):
        extract_document(raw)
