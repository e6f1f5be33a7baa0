"""Tests for person and connection records."""

import pytest

from lovegraph.network.person import (
    ConnectionRecord,
    ConnectionStatus,
    Person,
    accepted_edges,
)


class TestPerson:
    def test_from_dict(self):
        p = Person.from_dict({"id": 3, "name": " Ana ", "instagram": "@ana"})
        assert p.name == "Ana"
        assert p.instagram == "@ana"

    def test_blank_instagram_is_none(self):
        assert Person.from_dict({"name": "Ana", "instagram": ""}).instagram is None

    def test_to_dict(self):
        assert Person("Ana").to_dict() == {"name": "Ana", "instagram": None}


class TestConnectionRecord:
    def test_from_dict(self):
        rec = ConnectionRecord.from_dict(
            {"id": 7, "name1": "Ana", "name2": "Bia", "status": "accepted"}
        )
        assert rec.is_accepted
        assert rec.as_pair() == ("Ana", "Bia")
        assert rec.id == 7

    def test_missing_status_is_pending(self):
        rec = ConnectionRecord.from_dict({"name1": "Ana", "name2": "Bia"})
        assert rec.status is ConnectionStatus.PENDING
        assert not rec.is_accepted

    def test_status_case_insensitive(self):
        rec = ConnectionRecord.from_dict(
            {"name1": "Ana", "name2": "Bia", "status": "REJECTED"}
        )
        assert rec.status is ConnectionStatus.REJECTED

    def test_unknown_status(self):
        with pytest.raises(ValueError):
            ConnectionRecord.from_dict({"name1": "A", "name2": "B", "status": "maybe"})

    def test_missing_name(self):
        with pytest.raises(KeyError):
            ConnectionRecord.from_dict({"name1": "A"})

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_null_or_blank_name(self, name):
        with pytest.raises(ValueError):
            ConnectionRecord.from_dict({"name1": name, "name2": "Ana"})
        with pytest.raises(ValueError):
            ConnectionRecord.from_dict({"name1": "Ana", "name2": name})

    def test_names_are_stripped(self):
        rec = ConnectionRecord.from_dict({"name1": " Ana ", "name2": "Bia\n"})
        assert rec.as_pair() == ("Ana", "Bia")

    def test_to_dict(self):
        rec = ConnectionRecord("Ana", "Bia", ConnectionStatus.ACCEPTED, id=1)
        assert rec.to_dict() == {
            "id": 1,
            "name1": "Ana",
            "name2": "Bia",
            "status": "accepted",
        }


class TestAcceptedEdges:
    def test_filters_by_status(self):
        records = [
            ConnectionRecord("A", "B", ConnectionStatus.ACCEPTED),
            ConnectionRecord("B", "C", ConnectionStatus.PENDING),
            ConnectionRecord("C", "D", ConnectionStatus.REJECTED),
            ConnectionRecord("D", "E", ConnectionStatus.ACCEPTED),
        ]
        assert accepted_edges(records) == [("A", "B"), ("D", "E")]

    def test_empty(self):
        assert accepted_edges([]) == []
