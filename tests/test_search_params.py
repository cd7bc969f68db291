from config import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from search import SortDirection, SortField, build_query


def test_defaults_when_nothing_is_supplied():
    query = build_query()

    assert query.query is None
    assert query.sort is None
    assert query.direction == SortDirection.ASC
    assert query.page == 1
    assert query.limit == DEFAULT_PAGE_LIMIT


def test_search_takes_precedence_over_query():
    assert build_query(search="anxiety", query="Chicago").query == "anxiety"
    assert build_query(query="Chicago").query == "Chicago"
    assert build_query(search="", query="Chicago").query == "Chicago"


def test_malformed_experience_bounds_are_ignored():
    query = build_query(min_experience="abc", max_experience="")

    assert query.min_experience is None
    assert query.max_experience is None


def test_experience_bounds_parse_leading_integer():
    query = build_query(min_experience="5", max_experience="10years")

    assert query.min_experience == 5
    assert query.max_experience == 10


def test_malformed_page_and_limit_fall_back_to_defaults():
    query = build_query(page="two", limit="-1")

    assert query.page == 1
    assert query.limit == DEFAULT_PAGE_LIMIT


def test_limit_is_capped():
    assert build_query(limit="100000").limit == MAX_PAGE_LIMIT
    assert build_query(limit="500", max_limit=50).limit == 50


def test_sort_field_must_be_a_known_attribute():
    assert build_query(sort="yearsOfExperience").sort == SortField.YEARS_OF_EXPERIENCE
    assert build_query(sort="specialties").sort is None
    assert build_query(sort="__class__").sort is None


def test_direction_is_descending_only_when_asked():
    assert build_query(direction="desc").direction == SortDirection.DESC
    assert build_query(direction="DESC").direction == SortDirection.DESC
    assert build_query(direction="sideways").direction == SortDirection.ASC
    assert build_query(direction=None).direction == SortDirection.ASC


def test_default_page_comes_from_config():
    from config import DEFAULT_PAGE

    assert build_query().page == DEFAULT_PAGE
    assert build_query(page="zero").page == DEFAULT_PAGE
