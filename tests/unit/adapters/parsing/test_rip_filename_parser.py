"""
Tests unitaires pour RipFilenameParser.

Corpus de noms de releases reels : titre, annee, qualite, infos et groupe.
Les titres sont compares sur leurs tokens normalises (casse ignoree).
"""

import pytest

from filmdepot.adapters.parsing import RipFilenameParser
from filmdepot.core.entities.rip import MovieRip
from filmdepot.core.exceptions import FileNameParserError
from filmdepot.core.ports.parser import IFilenameParser
from filmdepot.utils.helpers import get_string_tokens_without_punctuation


@pytest.fixture
def parser() -> RipFilenameParser:
    return RipFilenameParser()


def _same_title(actual: str, expected: str) -> bool:
    return get_string_tokens_without_punctuation(actual) == get_string_tokens_without_punctuation(
        expected
    )


class TestParse:
    """Tests pour RipFilenameParser.parse()."""

    def test_implements_interface(self, parser: RipFilenameParser) -> None:
        assert isinstance(parser, IFilenameParser)

    @pytest.mark.parametrize(
        "file_name,title,release_date,quality,info,group",
        [
            (
                "The.Deer.Hunter.1978.REMASTERED.1080p.BluRay.x264.DTS-HD.MA.5.1-FGT",
                "The Deer Hunter", "1978", "1080p", "BluRay.x264.DTS-HD.MA.5.1", "FGT",
            ),
            (
                "Khrustalyov.My.Car.1998.720p.BluRay.x264-GHOULS[rarbg]",
                "khrustalyov my car", "1998", "720p", "BluRay.x264", "GHOULS[rarbg]",
            ),
            (
                "Sicario 2015 1080p BluRay x264 AC3-JYK",
                "sicario", "2015", "1080p", "BluRay x264 AC3", "JYK",
            ),
            (
                "The.Lives.of.Others.2006.GERMAN.REMASTERED.1080p.BluRay.x264.DTS-NOGRP",
                "the lives of others", "2006", "1080p", "BluRay.x264.DTS", "NOGRP",
            ),
            (
                "Terminator.2.Judgement.Day.1991.Extended.REMASTERED.1080p.BluRay.H264.AAC.READ.NFO-RARBG",
                "terminator 2 judgement day", "1991", "1080p", "BluRay.H264.AAC.READ.NFO", "RARBG",
            ),
            (
                "A.Hero.2021.1080p.AMZN.WEBRip.DDP5.1.x264-TEPES",
                "A Hero", "2021", "1080p", "AMZN.WEBRip.DDP5.1.x264", "TEPES",
            ),
            (
                "Better.Things.2008.FESTiVAL.DVDRip.XviD-NODLABS",
                "Better things", "2008", "DVDRip", "XviD", "NODLABS",
            ),
            ("Ex Drummer (2007)", "ex drummer", "2007", None, None, None),
            # Sans tiret apres la qualite, aucun groupe n'est deduit, meme quand
            # le dernier segment est un groupe connu ("anoXmous" reste dans l'info)
            (
                "Idiocracy.2006.WEB-DL.1080p.x264.anoXmous",
                "idiocracy", "2006", "1080p", "x264.anoXmous", None,
            ),
        ],
    )
    def test_parse_release_names(
        self, parser, file_name, title, release_date, quality, info, group
    ) -> None:
        movie_rip = parser.parse(file_name)

        assert isinstance(movie_rip, MovieRip)
        assert movie_rip.file_name == file_name
        assert _same_title(movie_rip.parsed_title, title)
        assert movie_rip.parsed_release_date == release_date
        assert movie_rip.parsed_rip_quality == quality
        assert movie_rip.parsed_rip_info == info
        assert movie_rip.parsed_rip_group == group
        assert movie_rip.movie is None

    def test_title_keeps_original_case(self, parser) -> None:
        movie_rip = parser.parse("The.Deer.Hunter.1978.1080p.BluRay.x264-FGT")
        assert movie_rip.parsed_title == "The Deer Hunter"

    def test_without_year_whole_name_is_title(self, parser) -> None:
        movie_rip = parser.parse("Some.Home.Movie.DVDRip-GRP")

        assert movie_rip.parsed_title == "Some Home Movie DVDRip-GRP"
        assert movie_rip.parsed_release_date is None
        assert movie_rip.parsed_rip_quality is None
        assert movie_rip.parsed_rip_info is None
        assert movie_rip.parsed_rip_group is None

    def test_year_inside_title_uses_second_year(self, parser) -> None:
        movie_rip = parser.parse("Blade.Runner.2049.2017.1080p.BluRay.x264-SPARKS")

        assert movie_rip.parsed_title == "Blade Runner 2049"
        assert movie_rip.parsed_release_date == "2017"
        assert movie_rip.parsed_rip_group == "SPARKS"

    def test_leading_year_belongs_to_title(self, parser) -> None:
        movie_rip = parser.parse("1917.2019.1080p.WEBRip.x264-RARBG")

        assert movie_rip.parsed_title == "1917"
        assert movie_rip.parsed_release_date == "2019"

    def test_quality_without_info_or_group(self, parser) -> None:
        movie_rip = parser.parse("Gummo.1997.DVDRip")

        assert movie_rip.parsed_rip_quality == "DVDRip"
        assert movie_rip.parsed_rip_info is None
        assert movie_rip.parsed_rip_group is None

    def test_bracketed_source_marker(self, parser) -> None:
        movie_rip = parser.parse("Papillon (1973) [DvdRip] [Xvid] {1337x}-Noir")

        assert movie_rip.parsed_title == "Papillon"
        assert movie_rip.parsed_release_date == "1973"
        assert movie_rip.parsed_rip_quality == "DvdRip"
        assert movie_rip.parsed_rip_info == "[Xvid] {1337x}"
        assert movie_rip.parsed_rip_group == "Noir"

    def test_parse_is_deterministic(self, parser) -> None:
        file_name = "Sicario 2015 1080p BluRay x264 AC3-JYK"
        assert parser.parse(file_name) == parser.parse(file_name)

    @pytest.mark.parametrize("file_name", ["", "   ", "movies/Sicario.2015", "a\\b.2015"])
    def test_malformed_name_raises(self, parser, file_name) -> None:
        with pytest.raises(FileNameParserError):
            parser.parse(file_name)


class TestSplitTitleAndReleaseDate:
    @pytest.mark.parametrize(
        "text,expected_title,expected_release_date",
        [
            ("The Tragedy Of Macbeth (2021)", "the tragedy of macbeth", "2021"),
            ("Cop Car 2015 ", "Cop Car", "2015"),
            ("  Khrustalyov.My.Car.1998", "khrustalyov my car", "1998"),
        ],
    )
    def test_split(self, text, expected_title, expected_release_date) -> None:
        title, release_date, remainder = RipFilenameParser.split_title_and_release_date(text)

        assert _same_title(title, expected_title)
        assert release_date == expected_release_date
        assert remainder == ""

    def test_out_of_range_year_is_not_a_release_date(self) -> None:
        title, release_date, _ = RipFilenameParser.split_title_and_release_date("Movie 1850")
        assert title == "Movie 1850"
        assert release_date is None

    def test_year_after_quality_marker_is_skipped(self) -> None:
        title, release_date, _ = RipFilenameParser.split_title_and_release_date(
            "Some.Movie.1080p.2012"
        )
        assert release_date is None
        assert title == "Some Movie 1080p 2012"

    def test_non_ascii_digits_are_not_a_release_date(self) -> None:
        title, release_date, _ = RipFilenameParser.split_title_and_release_date(
            "Movie.\u0662\u0660\u0661\u0669.1080p"
        )
        assert release_date is None
        assert title == "Movie \u0662\u0660\u0661\u0669 1080p"


class TestSplitRipInfoAndGroup:
    @pytest.mark.parametrize(
        "text,expected_info,expected_group",
        [
            ("BluRay.x264-GECKOS", "BluRay.x264", "GECKOS"),
            ("BluRay.H264.AAC-VXT", "BluRay.H264.AAC", "VXT"),
            ("BluRay x264 DTS-JYK", "BluRay x264 DTS", "JYK"),
            ("BluRay.x264.DTS-HD.MA.5.1-FGT", "BluRay.x264.DTS-HD.MA.5.1", "FGT"),
            ("BluRay x264 Mayan AAC - Ozlem", "BluRay x264 Mayan AAC", "Ozlem"),
            ("BDRip.XviD-Larceny", "BDRip.XviD", "Larceny"),
            ("[DvdRip] [Xvid] {1337x}-Noir", "[DvdRip] [Xvid] {1337x}", "Noir"),
        ],
    )
    def test_split_at_last_hyphen(self, text, expected_info, expected_group) -> None:
        assert RipFilenameParser.split_rip_info_and_group(text) == (expected_info, expected_group)

    @pytest.mark.parametrize(
        "text",
        ["BluRay.x264.anoXmous", "BluRay 5.1 Ch x265 HEVC SUJAIDR"],
    )
    def test_without_hyphen_group_is_none(self, text) -> None:
        assert RipFilenameParser.split_rip_info_and_group(text) == (text, None)

    def test_empty_parts_become_none(self) -> None:
        assert RipFilenameParser.split_rip_info_and_group("-GRP") == (None, "GRP")
        assert RipFilenameParser.split_rip_info_and_group("x264-") == ("x264", None)
        assert RipFilenameParser.split_rip_info_and_group("") == (None, None)
