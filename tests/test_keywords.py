from seedbed.processors import extract_keywords, fallback_queries


def test_task_manager_example():
    """
    WHY: Stop words and short tokens must not leak into search queries.
    EXPECTED: "an" and "for" are dropped, the hyphenated word stays whole,
    and only the first four keywords survive.
    """
    result = extract_keywords("An AI-powered task manager for remote teams", "")
    assert result == "ai-powered task manager remote"

    words = result.split()
    assert "an" not in words
    assert "for" not in words
    assert len(words) <= 4


def test_punctuation_is_stripped_and_words_deduplicated():
    result = extract_keywords("Recipe! Recipe? recipe sharing", "Share recipes.")
    assert result == "recipe sharing share recipes"


def test_domain_generic_words_are_dropped():
    result = extract_keywords("A web app platform tool", "helps users create things")
    assert result == "things"


def test_description_is_appended_after_title():
    result = extract_keywords("Carbon", "footprint tracking dashboard emissions reports")
    assert result == "carbon footprint tracking dashboard"


def test_short_tokens_are_dropped():
    assert extract_keywords("AI ML UX go", "") == ""


def test_fallback_queries_use_one_string_everywhere():
    queries = fallback_queries("Carbon footprint tracking app", "")
    assert queries.github == "carbon footprint tracking"
    assert queries.hn == queries.github
    assert queries.npm == queries.github
