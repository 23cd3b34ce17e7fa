"""
简历存储与 getAllResumes 工具：内存存储、Firestore 文档映射、存储选择、回退策略配置。
"""
import asyncio
import logging
from unittest.mock import MagicMock

import pytest

from careerai.ai import FallbackPolicy, ToolExecutionError, ToolRegistry
from careerai.flows.resume_retrieval import TOOL_NAME, resume_retrieval_tool
from careerai.resumes.samples import SAMPLE_RESUMES, sample_resumes
from careerai.resumes.schemas import StoredResume
from careerai.resumes.sources import InMemoryResumeStore, ResumeStoreError, get_resume_store
from careerai.resumes.sources.firestore import FirestoreResumeStore

from conftest import BrokenStore, make_resume


def _call(store, policy):
    registry = ToolRegistry([resume_retrieval_tool(store, policy)])
    return asyncio.run(registry.call(TOOL_NAME, {}))


# ──────────────────────────────────────────────
# 1. 存储
# ──────────────────────────────────────────────

class TestInMemoryStore:
    def test_add_overwrites_by_id(self):
        s = InMemoryResumeStore([make_resume(1, "old")])
        s.add(make_resume(1, "new"))
        assert [r.resume_text for r in s.fetch_resumes()] == ["new"]

    def test_empty(self):
        assert InMemoryResumeStore().fetch_resumes() == []


def _doc(doc_id, data):
    doc = MagicMock()
    doc.id = doc_id
    doc.to_dict.return_value = data
    return doc


class TestFirestoreStore:
    def test_maps_documents(self):
        client = MagicMock()
        client.collection.return_value.stream.return_value = [
            _doc("a", {"resumeText": "Name: Jane", "userProfileId": "u1", "title": "Jane's Resume"}),
            _doc("b", {"title": "structured only"}),
            _doc("c", {"resumeText": "   "}),
        ]
        store = FirestoreResumeStore(project="demo", client=client)
        resumes = store.fetch_resumes()
        client.collection.assert_called_once_with("resumes")
        assert resumes == [StoredResume(id="a", resume_text="Name: Jane", user_profile_id="u1", title="Jane's Resume")]

    def test_stream_error_wrapped(self):
        client = MagicMock()
        client.collection.return_value.stream.side_effect = RuntimeError("permission denied")
        with pytest.raises(ResumeStoreError) as exc:
            FirestoreResumeStore(project="demo", client=client).fetch_resumes()
        assert "permission denied" in str(exc.value)


class TestStoreSelection:
    def test_default_is_memory(self, monkeypatch):
        monkeypatch.delenv("CAREERAI_RESUME_STORE", raising=False)
        assert isinstance(get_resume_store(), InMemoryResumeStore)

    def test_firestore_from_env(self, monkeypatch):
        monkeypatch.setenv("CAREERAI_RESUME_STORE", "Firestore")
        monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "careerai-demo")
        store = get_resume_store()
        assert isinstance(store, FirestoreResumeStore)
        assert store.project == "careerai-demo"

    def test_explicit_id_wins(self, monkeypatch):
        monkeypatch.setenv("CAREERAI_RESUME_STORE", "firestore")
        assert isinstance(get_resume_store("memory"), InMemoryResumeStore)


# ──────────────────────────────────────────────
# 2. getAllResumes
# ──────────────────────────────────────────────

class TestGetAllResumes:
    def test_returns_stored_texts(self, store):
        assert _call(store, "none") == [r.resume_text for r in store.fetch_resumes()]

    def test_empty_store_without_fallback(self, empty_store):
        assert _call(empty_store, "none") == []

    def test_empty_store_with_fallback_returns_samples(self, empty_store, caplog):
        with caplog.at_level(logging.WARNING):
            out = _call(empty_store, "on_empty")
        assert out == list(SAMPLE_RESUMES)
        assert len(out) == 10
        assert any(r.levelno == logging.WARNING and TOOL_NAME in r.getMessage() for r in caplog.records)

    def test_broken_store_without_fallback(self):
        with pytest.raises(ToolExecutionError) as exc:
            _call(BrokenStore(), "none")
        assert exc.value.tool == TOOL_NAME

    def test_broken_store_with_fallback(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert _call(BrokenStore(), FallbackPolicy.ON_EMPTY_OR_ERROR) == sample_resumes()
        assert "ResumeStoreError" in caplog.text

    def test_logs_fetch(self, store, caplog):
        with caplog.at_level(logging.INFO, logger="careerai.flows.resume_retrieval"):
            _call(store, "none")
        assert "found 2 resumes" in caplog.text

    def test_policy_from_env(self, monkeypatch, store):
        monkeypatch.setenv("CAREERAI_RESUME_FALLBACK", "on_empty_or_error")
        assert resume_retrieval_tool(store).fallback_policy is FallbackPolicy.ON_EMPTY_OR_ERROR

    def test_invalid_policy_env_means_none(self, monkeypatch, store):
        monkeypatch.setenv("CAREERAI_RESUME_FALLBACK", "always")
        assert resume_retrieval_tool(store).fallback_policy is FallbackPolicy.NONE

    def test_samples_are_a_fresh_list(self):
        first = sample_resumes()
        first.clear()
        assert len(sample_resumes()) == 10
