"""Tests for the KSL dictionary."""

import json

import pytest

from common.ksl import BASE_VOCABULARY, KSLDictionary


class TestKSLDictionary:
    """Test cases for KSLDictionary."""

    def test_lookup_hit(self, dictionary):
        """사전에 있는 단어는 글로스를 반환"""
        assert dictionary.lookup("안녕하세요") == "안녕"
        assert dictionary.lookup("먹어요") == "먹다"

    def test_lookup_miss(self, dictionary):
        """없는 단어는 None"""
        assert dictionary.lookup("알수없는단어") is None

    def test_add_inserts_and_overwrites(self, dictionary):
        """add는 추가와 덮어쓰기를 모두 허용"""
        size = dictionary.size()

        dictionary.add("테스트단어", "테스트")
        assert dictionary.lookup("테스트단어") == "테스트"
        assert dictionary.size() == size + 1

        dictionary.add("테스트단어", "시험")
        assert dictionary.lookup("테스트단어") == "시험"
        assert dictionary.size() == size + 1

    def test_instances_do_not_share_state(self):
        """인스턴스마다 기본 어휘의 복사본을 가짐"""
        first = KSLDictionary()
        second = KSLDictionary()

        first.add("새단어", "새")

        assert "새단어" in first
        assert "새단어" not in second
        assert "새단어" not in BASE_VOCABULARY

    def test_size_matches_len(self, dictionary):
        assert dictionary.size() == len(dictionary) == len(BASE_VOCABULARY)
        assert dictionary.size() > 0

    def test_custom_entries(self):
        """지정한 항목만으로 사전 생성"""
        custom = KSLDictionary({"사과": "사과"})
        assert custom.size() == 1
        assert custom.lookup("안녕") is None

    def test_update(self, dictionary):
        dictionary.update({"사과": "사과", "바나나": "바나나"})
        assert dictionary.lookup("바나나") == "바나나"

    def test_load_json(self, dictionary, tmp_path):
        """JSON 오버레이 사전 로드"""
        path = tmp_path / "overlay.json"
        path.write_text(json.dumps({"지하철": "지하철", "안녕": "인사"}, ensure_ascii=False),
                        encoding="utf-8")

        added = dictionary.load_json(str(path))

        assert added == 2
        assert dictionary.lookup("지하철") == "지하철"
        assert dictionary.lookup("안녕") == "인사"

    def test_load_json_rejects_non_object(self, dictionary, tmp_path):
        path = tmp_path / "overlay.json"
        path.write_text(json.dumps(["지하철"]), encoding="utf-8")

        with pytest.raises(ValueError):
            dictionary.load_json(str(path))
