from pathlib import Path

import pytest

NAMESPACES = """\
apiVersion: v1
kind: Namespace
metadata:
  name: a
---
apiVersion: v1
kind: Namespace
metadata:
  name: b
"""

MIXED = """\
apiVersion: v1
kind: Namespace
metadata:
  labels:
    cloudbees-sidecar-injector: enabled
  name: jenkins-agents
---
apiVersion: apps/v1
kind: Deployment
metadata:
  name: web
  namespace: jenkins-agents
  labels:
    app: web
    tier: frontend
spec:
  replicas: 2
  template:
    spec:
      containers:
        - name: web
          image: nginx:1.25
---
---
apiVersion: v1
kind: Service
metadata:
  name: web
  namespace: default
  labels:
    app: web
spec:
  ports:
    - port: 80
"""


@pytest.fixture
def write_manifest(tmp_path: Path):
    def _write(content: str, name: str = "manifest.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def namespaces_file(write_manifest) -> Path:
    return write_manifest(NAMESPACES, "namespaces.yaml")


@pytest.fixture
def mixed_file(write_manifest) -> Path:
    return write_manifest(MIXED, "mixed.yaml")
