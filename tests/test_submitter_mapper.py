# tests/test_submitter_mapper.py

from __future__ import annotations

from gedcomx_converter.mapping.result import ConversionResult
from gedcomx_converter.mapping.submitter import SubmitterMapper
from gedcomx_converter.records.raw import ExtensionTag, RawSubmitter


def test_submitter_becomes_dataset_contributor(ctx) -> None:
    result = ConversionResult()
    raw = RawSubmitter(
        id="U1",
        name="Hanako Tanaka",
        address="1-2-3 Chiyoda\nTokyo",
        phone="03-1234",
        email="hanako@example.jp",
        language="Japanese",
        change_date="1 JAN 2020",
    )

    agent = SubmitterMapper().to_contributor(raw, result, ctx)

    assert result.dataset_contributor is agent
    assert result.contributor_modified == "1 JAN 2020"
    assert agent.to_dict() == {
        "id": "U1",
        "names": [{"value": "Hanako Tanaka"}],
        "addresses": [{"value": "1-2-3 Chiyoda Tokyo"}],
        "phones": ["tel:03-1234"],
        "emails": ["mailto:hanako@example.jp"],
        "language": "Japanese",
    }
    assert ctx.diagnostics == []


def test_submitter_ignored_fields_are_reported(ctx) -> None:
    raw = RawSubmitter(id="U1", rin="77", extensions=[ExtensionTag("_PHOTO", "me.jpg")])
    SubmitterMapper().to_contributor(raw, ConversionResult(), ctx)

    assert [str(d) for d in ctx.diagnostics] == [
        "[@U1@ SUBM] RIN (77) was ignored.",
        "[@U1@ SUBM] Unsupported (_PHOTO): _PHOTO me.jpg",
    ]


def test_none_submitter(ctx) -> None:
    assert SubmitterMapper().to_contributor(None, ConversionResult(), ctx) is None
