from nbib_csl.models import DateField, DateParts, NameField, OrdinaryField
from nbib_csl.reducer import reduce_names
from nbib_csl.scanner import merge_continuations
from nbib_csl.tags import map_fields, process_tag


def _names(fields):
    return [field for field in fields if isinstance(field, NameField)]


def test_full_and_abbreviated_author_collapse():
    fields = [process_tag("FAU", "Smith, John"), process_tag("AU", "Smith J")]

    reduced = reduce_names(fields)

    assert len(reduced) == 1
    assert reduced[0].parts.family == "Smith"
    assert reduced[0].parts.given == "John"
    assert reduced[0].full is True


def test_two_authors_reduce_from_four_entries(sample_record):
    fields = list(map_fields(merge_continuations(sample_record)))
    assert len(_names(fields)) == 4

    names = _names(reduce_names(fields))

    assert [(n.parts.family, n.parts.given) for n in names] == [
        ("Blachly", "James S"),
        ("Gregory", "Charles Thomas"),
    ]


def test_non_names_come_first_in_original_order():
    fields = [
        process_tag("PMID", "1"),
        process_tag("FAU", "Doe, Jane"),
        process_tag("AU", "Doe J"),
        process_tag("TI", "Title"),
        process_tag("DP", "2021"),
    ]

    reduced = reduce_names(fields)

    assert reduced[:3] == [
        OrdinaryField(key="note", value="PMID: 1"),
        OrdinaryField(key="title", value="Title"),
        DateField(key="issued", parts=DateParts(raw="2021")),
    ]
    assert _names(reduced) == [fields[1]]


def test_authors_and_editors_are_reduced_separately():
    fields = [
        process_tag("FAU", "Doe, Jane"),
        process_tag("AU", "Doe J"),
        process_tag("FED", "Doe, John"),
        process_tag("ED", "Doe J"),
    ]

    names = reduce_names(fields)

    assert [(n.key, n.parts.given) for n in names] == [("author", "Jane"), ("editor", "John")]


def test_non_adjacent_duplicates_are_kept():
    fields = [
        process_tag("FAU", "Doe, Jane"),
        process_tag("FAU", "Roe, Richard"),
        process_tag("AU", "Doe J"),
    ]

    assert len(reduce_names(fields)) == 3


def test_multi_word_family_matches_on_first_token():
    fields = [process_tag("FAU", "van der Berg, Anna"), process_tag("AU", "van der Berg A")]
    assert len(reduce_names(fields)) == 1


def test_empty_sequence():
    assert reduce_names([]) == []
