"""Unit tests for the Pig Latin transformer.

WHY: The transformer is the public heart of the package. These tests pin
the documented examples and the behaviour on diacritics, ligatures, IPA,
apostrophes, casing and non-Latin text.

HOW: Most tests use the default_transformer fixture ("ay"/"way"); custom
suffix and contextual-y tests build their own transformer.

RULES:
- Tests use the public transform() / to_pig_latin() API
- Separators must come through unchanged
"""

import dataclasses
from concurrent.futures import ThreadPoolExecutor

import pytest

from porcus import DEFAULT_CONSONANT_SUFFIX, DEFAULT_VOWEL_SUFFIX, to_pig_latin
from porcus.core.ir import TransformerConfig
from porcus.core.transformer import PigLatinTransformer


def _assert_pig_latin(transformer, pairs):
    for text, expected in pairs:
        assert transformer.transform(text) == expected, text


class TestDocumentedScenarios:

    def test_pig_latin(self, default_transformer):
        assert default_transformer.transform("Pig latin") == "Igpay atinlay"

    def test_french(self, default_transformer):
        assert default_transformer.transform("à l’œuf") == "àway œufl’ay"

    def test_czech(self, default_transformer):
        assert default_transformer.transform("Česko") == "Eskočay"

    def test_ipa_suffixes(self, ipa_transformer):
        assert ipa_transformer.transform("ə stɹɪŋ") == "əweɪ ɪŋstɹeɪ"

    def test_empty_input(self, default_transformer):
        assert default_transformer.transform("") == ""

    def test_empty_suffixes(self):
        assert PigLatinTransformer("", "").transform("cat") == "atc"
        assert PigLatinTransformer("", "").transform("egg") == "egg"

    def test_punctuation_passes_through(self, default_transformer):
        assert default_transformer.transform("pig, latin!") == "igpay, atinlay!"


class TestSingleWords:

    def test_consonant_led(self, default_transformer):
        _assert_pig_latin(default_transformer, [
            ("nix", "ixnay"),
            ("scram", "amscray"),
            ("string", "ingstray"),
            ("joy", "oyjay"),
        ])

    def test_vowel_led(self, default_transformer):
        _assert_pig_latin(default_transformer, [
            ("aid", "aidway"),
            ("oy", "oyway"),
            ("egg", "eggway"),
        ])

    def test_no_vowel(self, default_transformer):
        _assert_pig_latin(default_transformer, [
            ("hmm", "hmmay"),
            ("p'sst", "p'sstay"),
        ])

    def test_y_is_a_vowel_by_default(self, default_transformer):
        _assert_pig_latin(default_transformer, [
            ("yoga", "yogaway"),
            ("rhythm", "ythmrhay"),
            ("My", "Ymay"),
        ])


class TestContextualY:

    @pytest.fixture
    def transformer(self):
        return PigLatinTransformer(contextual_y=True)

    def test_y_as_consonant(self, transformer):
        _assert_pig_latin(transformer, [
            ("yoga", "ogayay"),
            ("Yiddish", "Iddishyay"),
            ("Yes", "Esyay"),
        ])

    def test_y_as_vowel(self, transformer):
        _assert_pig_latin(transformer, [
            ("ytterbium", "ytterbiumway"),
            ("Ypres", "Ypresway"),
            ("Yvonne", "Yvonneway"),
            ("yyadzehe", "yyadzeheway"),
            ("yy", "yyway"),
        ])

    def test_y_after_joiner(self, transformer):
        assert transformer.transform("The Rebbe z״ya") == "Ethay Ebberay az״yay"


class TestDiacriticsAndLigatures:

    def test_diacritics(self, default_transformer):
        _assert_pig_latin(default_transformer, [
            ("café", "afécay"),
            ("ça", "açay"),
            ("çà", "àçay"),
            ("âge", "âgeway"),
            ("Éole", "Éoleway"),
            ("článek", "ánekčlay"),
            ("Słowacją", "Owacjąsłay"),
            ("ščepec", "epecščay"),
        ])

    def test_decomposed_input(self, default_transformer):
        assert default_transformer.transform("c\u0327a") == "ac\u0327ay"

    def test_latin_supplement(self, default_transformer):
        _assert_pig_latin(default_transformer, [
            ("œuf", "œufway"),
            ("sœur", "œursay"),
            ("ﬀion", "ionﬀay"),
            ("ʁɛv", "ɛvʁay"),
        ])


class TestNonLatin:

    def test_non_latin_words_unchanged(self, default_transformer):
        _assert_pig_latin(default_transformer, [
            ("दिखना", "दिखना"),
            ("αGo", "αGo"),
            ("αβγ δ", "αβγ δ"),
        ])

    def test_non_latin_letter_ends_cluster(self, default_transformer):
        assert default_transformer.transform("twerkना") == "erkनाtway"

    def test_digits_split_words(self, default_transformer):
        assert default_transformer.transform("TV9मराठी") == "TVAY9मराठी"


class TestCase:

    def test_three_way_policy(self, default_transformer):
        _assert_pig_latin(default_transformer, [
            ("pig", "igpay"),
            ("Pig", "Igpay"),
            ("PIG", "IGPAY"),
            ("hello", "ellohay"),
            ("Hello", "Ellohay"),
            ("HELLO", "ELLOHAY"),
            ("EGG", "EGGWAY"),
        ])

    def test_mixed_case_is_lowercased(self, default_transformer):
        _assert_pig_latin(default_transformer, [
            ("heLLo", "ellohay"),
            ("iPhone", "iphoneway"),
        ])

    def test_single_capital_is_sentence_case(self, default_transformer):
        _assert_pig_latin(default_transformer, [
            ("I", "Iway"),
            ("A", "Away"),
        ])


class TestSentences:

    def test_sentences(self, default_transformer):
        _assert_pig_latin(default_transformer, [
            ("hello world", "ellohay orldway"),
            ("hello-hi", "ellohay-ihay"),
            ("Yes (no)", "Yesway (onay)"),
            ("Hello, ADORABLE world!", "Ellohay, ADORABLEWAY orldway!"),
            ("🦀 My name is मनीष. 📎", "🦀 Ymay amenay isway मनीष. 📎"),
            ("L'eau d'orange", "Eaul'ay oranged'ay"),
            ("P'sst ! Par ici !", "P'sstay ! Arpay iciway !"),
            ("Simon Example z״l", "Imonsay Exampleway z״lay"),
            ("Ploni Almoni a״h", "Oniplay Almoniway a״hway"),
            ("M'lady", "Adym'lay"),
            ("'tis", "'istay"),
        ])

    def test_whitespace_preserved(self, default_transformer):
        assert default_transformer.transform("  pig\t\tlatin \n") == "  igpay\t\tatinlay \n"


class TestCustomSuffixes:

    def test_custom_suffixes(self):
        transformer = PigLatinTransformer("yay", "-hay")
        assert transformer.transform("Hello, egg!") == "Ellohyay, egg-hay!"

    def test_suffix_follows_word_case(self):
        transformer = PigLatinTransformer("Ay", "Way")
        assert transformer.transform("pig PIG") == "igpay IGPAY"


class TestConfiguration:

    def test_defaults(self, default_transformer):
        assert default_transformer.consonant_suffix == DEFAULT_CONSONANT_SUFFIX == "ay"
        assert default_transformer.vowel_suffix == DEFAULT_VOWEL_SUFFIX == "way"
        assert default_transformer.config == TransformerConfig()

    def test_config_is_immutable(self, default_transformer):
        with pytest.raises(dataclasses.FrozenInstanceError):
            default_transformer.config.consonant_suffix = "oy"

    def test_from_config(self):
        config = TransformerConfig("eɪ", "weɪ")
        transformer = PigLatinTransformer.from_config(config)
        assert transformer.config is config
        assert transformer.transform("ə stɹɪŋ") == "əweɪ ɪŋstɹeɪ"

    def test_repr(self):
        assert "consonant_suffix='eɪ'" in repr(PigLatinTransformer("eɪ", "weɪ"))


class TestPurity:

    def test_repeated_calls_same_result(self, default_transformer):
        assert default_transformer.transform("Pig latin") == default_transformer.transform("Pig latin")

    def test_output_is_plain_text(self, default_transformer):
        once = default_transformer.transform("pig")
        assert once == "igpay"
        assert default_transformer.transform(once) == "igpayway"
        assert default_transformer.transform("pig") == "igpay"

    def test_threads_share_one_transformer(self, default_transformer):
        texts = ["Pig latin", "à l’œuf", "Česko", "HELLO world"] * 25
        expected = [default_transformer.transform(t) for t in texts]
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(default_transformer.transform, texts))
        assert results == expected

    def test_to_pig_latin_alias(self, default_transformer):
        assert default_transformer.to_pig_latin("pig") == "igpay"


class TestModuleFunction:

    def test_defaults(self):
        assert to_pig_latin("Pig latin") == "Igpay atinlay"

    def test_suffixes(self):
        assert to_pig_latin("ə stɹɪŋ", "eɪ", "weɪ") == "əweɪ ɪŋstɹeɪ"

    def test_explicit_transformer(self, ipa_transformer):
        assert to_pig_latin("ə", transformer=ipa_transformer) == "əweɪ"
