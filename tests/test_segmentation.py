from newsreader.segmentation import (
    DEFAULT_ABBREVIATIONS, DEFAULT_PUNCTUATION, SentenceSegmenter, WordTokenizer,
)

segment = SentenceSegmenter().segment
tokenize = WordTokenizer().tokenize

def test_splits_on_periods():
    assert segment("This is first. This is second.") == ["This is first.", "This is second."]

def test_abbreviation_does_not_end_sentence():
    assert segment("Mr. Smith went home. He was tired.") == ["Mr. Smith went home.", "He was tired."]

def test_abbreviation_list_is_pinned():
    assert DEFAULT_ABBREVIATIONS == {"Mr", "Mrs", "Ms", "Dr", "Prof", "Sr", "Jr"}

def test_every_default_abbreviation_is_masked():
    text = "Mrs. A met Ms. B and Dr. C with Prof. D, Sr. E and Jr. F today. Done."
    assert segment(text) == ["Mrs. A met Ms. B and Dr. C with Prof. D, Sr. E and Jr. F today.", "Done."]

def test_abbreviations_are_case_sensitive():
    assert segment("Ask mr. Smith.") == ["Ask mr.", "Smith."]

def test_abbreviation_must_start_a_token():
    assert segment("It cost 5 USDr. Then it rose.") == ["It cost 5 USDr.", "Then it rose."]

def test_exclamation_and_question_marks():
    assert segment("Really? Yes! Fine.") == ["Really?", "Yes!", "Fine."]

def test_terminator_runs_stay_with_their_sentence():
    assert segment("What?! No way.") == ["What?!", "No way."]

def test_end_of_text_without_terminator():
    assert segment("One. Two without end") == ["One.", "Two without end"]

def test_terminator_needs_following_whitespace():
    assert segment("Version 3.5 shipped.") == ["Version 3.5 shipped."]

def test_pieces_are_trimmed():
    assert segment("  First.\n\tSecond.  ") == ["First.", "Second."]

def test_empty_input():
    assert segment("") == []
    assert segment("   \n ") == []

def test_custom_abbreviations():
    seg = SentenceSegmenter(abbreviations={"St"})
    assert seg.segment("We walked down St. James. Mr. Lee waved.") == [
        "We walked down St. James.", "Mr.", "Lee waved.",
    ]

def test_no_abbreviations():
    assert SentenceSegmenter(abbreviations=()).segment("Dr. No. Yes.") == ["Dr.", "No.", "Yes."]

def test_tokenize_sentence():
    assert tokenize("This is a sentence.") == ["This", "is", "a", "sentence"]

def test_tokenize_removes_punctuation():
    assert tokenize("Hello, world!") == ["Hello", "world"]

def test_tokenize_drops_apostrophes_inside_words():
    assert tokenize("I don't know.") == ["I", "dont", "know"]

def test_tokenize_strips_quotes_and_brackets():
    assert tokenize('He said "yes" (twice); then: stop?') == ["He", "said", "yes", "twice", "then", "stop"]

def test_tokenize_keeps_other_characters():
    assert tokenize("U.S.-based e-mail costs $5") == ["US-based", "e-mail", "costs", "$5"]

def test_tokenize_drops_punctuation_only_tokens():
    assert tokenize("Wait ... what ?!") == ["Wait", "what"]

def test_tokenize_empty():
    assert tokenize("") == []
    assert tokenize("  ") == []

def test_punctuation_list_is_pinned():
    assert DEFAULT_PUNCTUATION == set(".,!?;:'\"()")

def test_custom_punctuation():
    assert WordTokenizer(punctuation=",").tokenize("Hi, there.") == ["Hi", "there."]
