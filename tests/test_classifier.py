#!/usr/bin/env python3
"""
Test suite for releasetags/classifier.py — full filename classification
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from releasetags.classifier import ClassificationResult, ReleaseClassifier, match_category
from releasetags.tables import build_default_tables


@pytest.fixture(scope='module')
def classifier():
    return ReleaseClassifier(build_default_tables())


class TestWebRelease:
    """Typical episode WEB-DL release"""

    NAME = "Show.S01E02.1080p.WEB-DL.DDP5.1.H.264-GROUPX.mkv"

    @pytest.fixture
    def result(self, classifier):
        return classifier.classify(self.NAME)

    def test_resolution(self, result):
        assert result.resolution == '1080p'

    def test_quality(self, result):
        assert result.quality == 'WEB-DL'

    def test_audio(self, result):
        assert result.audio_tags == ('DD+', '5.1')

    def test_encode(self, result):
        assert result.encodes == ('AVC',)

    def test_release_group(self, result):
        assert result.release_group == 'GROUPX'

    def test_no_visual_or_language_tags(self, result):
        assert result.visual_tags == ()
        assert result.languages == ()

    def test_filename_kept(self, result):
        assert result.filename == self.NAME


class TestRemuxRelease:
    """UHD remux with every tag family present"""

    NAME = "Movie.2019.2160p.UHD.BluRay.REMUX.HDR10.DV.HEVC.TrueHD.Atmos.7.1-FraMeSToR.mkv"

    def test_full_result(self, classifier):
        result = classifier.classify(self.NAME)
        assert result.resolution == '2160p'
        assert result.quality == 'BluRay REMUX'
        assert result.visual_tags == ('HDR10', 'DV')
        assert result.audio_tags == ('Atmos', 'TrueHD', '7.1')
        assert result.encodes == ('HEVC',)
        assert result.languages == ('Remux_T1',)
        assert result.release_group == 'FraMeSToR'


class TestSingleBest:
    """Resolution and quality report at most one label, by table order"""

    def test_highest_resolution_wins(self, classifier):
        assert classifier.classify("Movie.1080p.2160p.mkv").resolution == '2160p'

    def test_remux_beats_bluray(self, classifier):
        assert classifier.classify("Movie.1080p.BluRay.REMUX.mkv").quality == 'BluRay REMUX'

    def test_bdrip_is_bluray(self, classifier):
        assert classifier.classify("Movie.1999.1080p.BDRip.x264.mkv").quality == 'BluRay'

    @pytest.mark.parametrize("name,quality", [
        ("Movie.2019.1080p.WEBRip.x264.mkv", 'WEBRip'),
        ("Movie.2019.WEBDLRip.mkv", 'HDRip'),
        ("Movie.2019.720p.HDRip.XviD.avi", 'HDRip'),
        ("Movie.2019.HC.720p.mkv", 'HC HD-Rip'),
        ("Movie.1999.DVDRip.XviD.avi", 'DVDRip'),
        ("Show.S01E01.HDTV.x264.mkv", 'HDTV'),
        ("Movie.2023.CAM.x264.mkv", 'CAM'),
        ("Movie.2023.HDTS.mkv", 'TS'),
        ("Movie.2023.TC.mkv", 'TC'),
        ("Movie.2023.DVDSCR.mkv", 'SCR'),
    ])
    def test_quality_by_precedence(self, classifier, name, quality):
        assert classifier.classify(name).quality == quality

    def test_nothing_found(self, classifier):
        result = classifier.classify("Some Random Name")
        assert result.resolution is None
        assert result.quality is None


class TestMutualExclusion:
    """More specific tags hide the generic ones they contain"""

    @pytest.mark.parametrize("name,expected", [
        ("Movie.HDR10+.mkv", ('HDR10+',)),
        ("Movie.HDR10Plus.HDR10.HDR.mkv", ('HDR10+',)),
        ("Movie.HDR.HDR10.mkv", ('HDR10',)),
        ("Movie.HDR10.mkv", ('HDR10',)),
        ("Movie.HDR.mkv", ('HDR',)),
        ("Movie.HDR.DV.mkv", ('HDR', 'DV')),
    ])
    def test_hdr_family(self, classifier, name, expected):
        assert classifier.classify(name).visual_tags == expected

    @pytest.mark.parametrize("name,expected", [
        ("Movie.DTS-HD.MA.5.1.mkv", ('DTS-HD MA', '5.1')),
        ("Movie.DTS-HD.5.1.mkv", ('DTS-HD', '5.1')),
        ("Movie.DTS.mkv", ('DTS',)),
        ("Movie.E-AC3.mkv", ('DD+',)),
        ("Movie.DDP.DD.mkv", ('DD+',)),
        ("Movie.AC3.mkv", ('DD',)),
        ("Movie.DD.5.1.mkv", ('DD', '5.1')),
    ])
    def test_audio_family(self, classifier, name, expected):
        assert classifier.classify(name).audio_tags == expected

    def test_suppression_only_within_category(self, classifier):
        result = classifier.classify("Movie.2160p.HDR10.DTS-HD.MA.mkv")
        assert result.visual_tags == ('HDR10',)
        assert result.audio_tags == ('DTS-HD MA',)


class TestLanguages:
    """Language and tier labels, with subtitle disambiguation"""

    def test_japanese_subs_not_a_language(self, classifier):
        assert 'Japanese' not in classifier.classify("Anime.S01E01.Japanese.Subs.mkv").languages

    def test_japanese_audio(self, classifier):
        assert classifier.classify("Anime.S01E01.Japanese.Audio.mkv").languages == ('Japanese',)

    def test_multiple_languages_in_table_order(self, classifier):
        assert classifier.classify("Movie.2019.ITA.ENG.1080p.mkv").languages == ('English', 'Italian')

    def test_markers_before_names(self, classifier):
        result = classifier.classify("Anime.S01E01.English.Dubbed.1080p.mkv")
        assert result.languages == ('Dubbed', 'English')

    def test_bad_group(self, classifier):
        assert 'BAD' in classifier.classify("Movie.2019.1080p.BluRay.x264-YIFY.mp4").languages

    def test_web_tier(self, classifier):
        result = classifier.classify("Movie.2019.1080p.WEB-DL.DDP5.1.H.264-FLUX.mkv")
        assert result.languages == ('Web_T1',)
        assert result.release_group == 'FLUX'


class TestTotality:
    """Classification is total, pure and idempotent"""

    def test_empty_string(self, classifier):
        result = classifier.classify('')
        assert result == ClassificationResult(filename='')
        assert result.tags == ()

    def test_none_treated_as_empty(self, classifier):
        assert classifier.classify(None) == ClassificationResult(filename='')

    @pytest.mark.parametrize("name", [
        "Show.S01E02.1080p.WEB-DL.DDP5.1.H.264-GROUPX.mkv",
        "Movie.2019.2160p.UHD.BluRay.REMUX.HDR10.DV.HEVC.TrueHD.Atmos.7.1-FraMeSToR.mkv",
        "((( ]]] ---",
        "日本語のファイル名.mkv",
    ])
    def test_idempotent(self, classifier, name):
        assert classifier.classify(name) == classifier.classify(name)

    def test_classify_many(self, classifier):
        names = ["Movie.1080p.mkv", "Movie.720p.mkv"]
        results = classifier.classify_many(names)
        assert [r.resolution for r in results] == ['1080p', '720p']

    def test_default_tables_built_when_omitted(self):
        assert ReleaseClassifier().classify("Movie.720p.mkv").resolution == '720p'

    def test_shared_classifier_across_threads(self, classifier):
        names = [
            "Show.S01E02.1080p.WEB-DL.DDP5.1.H.264-GROUPX.mkv",
            "Movie.2019.2160p.UHD.BluRay.REMUX.HDR10.DV.HEVC.TrueHD.Atmos.7.1-FraMeSToR.mkv",
            "Anime.S01E01.Japanese.Subs.mkv",
        ] * 70
        expected = [classifier.classify(name) for name in names]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(classifier.classify, names))

        assert results == expected


class TestResultHelpers:
    """ClassificationResult conversions"""

    def test_to_dict_lists(self, classifier):
        data = classifier.classify("Movie.2019.1080p.BluRay.DTS-HD.MA.5.1.x264-GRP.mkv").to_dict()
        assert data['resolution'] == '1080p'
        assert data['audio_tags'] == ['DTS-HD MA', '5.1']
        assert data['visual_tags'] == []
        assert data['release_group'] == 'GRP'
        assert set(data) == {
            'filename', 'resolution', 'quality', 'visual_tags', 'audio_tags',
            'encodes', 'languages', 'release_group',
        }

    def test_tags_in_category_order(self, classifier):
        result = classifier.classify("Movie.2019.1080p.BluRay.HDR.x265.mkv")
        assert result.tags == ('1080p', 'BluRay', 'HDR', 'HEVC')

    def test_match_category_single_best(self, classifier):
        resolution = classifier.tables['resolution']
        assert match_category(resolution, "Movie.720p.480p.mkv") == ('720p',)
        assert match_category(resolution, "Movie.mkv") == ()
