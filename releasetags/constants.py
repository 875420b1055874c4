#!/usr/bin/env python3
"""
Shared constants for release tag classification

Single source of truth for tag fragments, tier group lists and defaults.
DO NOT duplicate these lists in other modules - import from here instead.

Fragments are raw expressions; releasetags.patterns wraps them with the
boundary rule. Order inside each table is precedence.
"""

# =============================================================================
# RESOLUTION (single-valued, highest resolution first)
# =============================================================================

RESOLUTION_FRAGMENTS = [
    ('2160p', r'(bd|hd|m)?(4k|2160(p|i)?)|u(ltra)?[ .\-_]?hd|3840\s?x\s?(\d{4})'),
    ('1440p', r'(bd|hd|m)?(1440(p|i)?)|2k|w?q(uad)?[ .\-_]?hd|2560\s?x\s?(\d{4})'),
    ('1080p', r'(bd|hd|m)?(1080(p|i)?)|f(ull)?[ .\-_]?hd|1920\s?x\s?(\d{3,4})'),
    ('720p', r'(bd|hd|m)?(720(p|i)?)|hd|1280\s?x\s?(\d{3,4})'),
    ('480p', r'(bd|hd|m)?(480(p|i)?)|sd'),
]

# =============================================================================
# SOURCE QUALITY (single-valued, first match wins)
# =============================================================================

QUALITY_FRAGMENTS = [
    # Remux must co-occur with a Blu-ray term on either side, or be a
    # BD/BR/UHD Remux token on its own
    ('BluRay REMUX',
     r'remux.*[ .\-_\[(]blu[ .\-_]?ray'
     r'|blu[ .\-_]?ray(?=[ .\-_].*remux)'
     r'|(bd|br|b|uhd)[ .\-_]?remux'),
    ('BluRay', r'blu[ .\-_]?ray|((bd|br|b)[ .\-_]?(rip|r)?)(?![ .\-_]?remux)'),
    ('WEB-DL', r'web[ .\-_]?(dl)?(?![ .\-_]?(dl[ .\-_]?rip|rip|cam))'),
    ('WEBRip', r'web[ .\-_]?rip'),
    ('HDRip', r'hd[ .\-_]?rip|web[ .\-_]?dl[ .\-_]?rip'),
    ('HC HD-Rip', r'hc|hd[ .\-_]?rip'),
    ('DVDRip', r'dvd[ .\-_]?(rip|mux|r|full|5|9)'),
    ('HDTV', r'(hd|pd)tv|tv[ .\-_]?rip|hdtv[ .\-_]?rip|dsr(ip)?|sat[ .\-_]?rip'),
    ('CAM', r'cam|hdcam|cam[ .\-_]?rip'),
    ('TS', r'telesync|ts|hd[ .\-_]?ts|pdvd|predvd(rip)?'),
    ('TC', r'telecine|tc|hd[ .\-_]?tc'),
    ('SCR', r'((dvd|bd|web|hd)?[ .\-_]?)?(scr(eener)?)'),
]

# =============================================================================
# VISUAL TAGS (multi-valued)
# =============================================================================

VISUAL_TAG_FRAGMENTS = [
    ('10bit', r'10[ .\-_]?bit'),
    ('HDR10+', r'hdr[ .\-_]?10[ .\-_]?(plus|[+])'),
    ('HDR10', r'hdr[ .\-_]?10'),
    ('HDR', r'hdr'),
    ('DV', r'do?(lby)?[ .\-_]?vi?(sion)?(?:[ .\-_]?atmos)?|dv'),
    ('3D', r'(bd)?(3|three)[ .\-_]?(d(imension)?(al)?)'),
    ('IMAX', r'imax'),
    ('AI', r'ai[ .\-_]?(upscale|enhanced|remaster)?'),
    ('SDR', r'sdr'),
]

# Most specific label first; a matched label hides the looser ones
VISUAL_TAG_SUPPRESSIONS = {
    'HDR10+': ('HDR10', 'HDR'),
    'HDR10': ('HDR',),
}

# =============================================================================
# AUDIO TAGS (multi-valued)
# =============================================================================

AUDIO_TAG_FRAGMENTS = [
    ('Atmos', r'atmos'),
    ('DD+', r'(d(olby)?[ .\-_]?d(igital)?[ .\-_]?(p(lus)?|\+)(?:[ .\-_]?(5[ .\-_]?1|7[ .\-_]?1))?)'
            r'|e[ .\-_]?ac[ .\-_]?3'),
    ('DD', r'(d(olby)?[ .\-_]?d(igital)?(?:[ .\-_]?(5[ .\-_]?1|7[ .\-_]?1))?)|ac[ .\-_]?3'),
    ('DTS-HD MA', r'dts[ .\-_]?hd[ .\-_]?ma'),
    ('DTS-HD', r'dts[ .\-_]?hd'),
    ('DTS', r'dts'),
    ('TrueHD', r'true[ .\-_]?hd'),
    ('5.1', r'(d(olby)?[ .\-_]?d(igital)?[ .\-_]?(p(lus)?|\+)?)?5[ .\-_]?1(ch)?'),
    ('7.1', r'(d(olby)?[ .\-_]?d(igital)?[ .\-_]?(p(lus)?|\+)?)?7[ .\-_]?1(ch)?'),
    ('AAC', r'q?aac(?:[ .\-_]?2)?'),
    ('FLAC', r'flac(?:[ .\-_]?(lossless|2\.0|x[2-4]))?'),
]

AUDIO_TAG_SUPPRESSIONS = {
    'DD+': ('DD',),
    'DTS-HD MA': ('DTS-HD', 'DTS'),
    'DTS-HD': ('DTS',),
}

# =============================================================================
# VIDEO ENCODES (multi-valued)
# =============================================================================

ENCODE_FRAGMENTS = [
    ('HEVC', r'hevc[ .\-_]?(10)?|[xh][ .\-_]?265'),
    ('AVC', r'avc|[xh][ .\-_]?264'),
    ('AV1', r'av1'),
    ('Xvid', r'xvid'),
    ('DivX', r'divx|dvix'),
    ('H-OU', r'h?(alf)?[ .\-_]?(ou|over[ .\-_]?under)'),
    ('H-SBS', r'h?(alf)?[ .\-_]?(sbs|side[ .\-_]?by[ .\-_]?side)'),
]

# =============================================================================
# RELEASE GROUP TIERS
# =============================================================================
# Memberships change often; keep them as plain lists so updates are data-only.
# A tier fires when the source term appears and one of the groups shows up
# later as its own token.

REMUX_SOURCE = r'remux'
BLURAY_SOURCE = r'blu[\-_]?ray'
WEB_SOURCE = r'web[\-_.]?(?:dl|rip)'

REMUX_TIERS = {
    'Remux_T1': ['3L', 'BiZKiT', 'BLURANiUM', 'CiNEPHiLES', 'FraMeSToR', 'PmP', 'ZQ'],
    'Remux_T2': ['Flights', 'NCmt', 'playBD', 'SiCFoI', 'SURFINBIRD', 'TEPES', 'decibeL',
                 'EPSiLON', 'HiFi', 'KRaLiMaRKo', 'PTer', 'TRiToN'],
    'Remux_T3': ['ATELiER', 'iFT', 'NTb', 'PTP', 'SumVision', 'TOA'],
}

BLURAY_TIERS = {
    'Bluray_T1': ['BBQ', 'c0kE', 'Chotab', 'CRiSC', 'CtrlHD', 'Dariush', 'decibeL', 'D-Z0N3',
                  'DON', 'EbP', 'EDPH', 'Geek', 'LolHD', 'MainFrame', 'NCmt', 'NTb', 'PTer',
                  'TayTO', 'TDD', 'TnP', 'VietHD', 'ZoroSenpai', 'W4NK3R', 'ZQ'],
    'Bluray_T2': ['EA', 'HiDt', 'HiSD', 'HQMUX', 'iFT', 'QOQ', 'SA89', 'sbR'],
    'Bluray_T3': ['ATELiER', 'BHDStudio', 'hallowed', 'HiFi', 'HONE', 'LoRD', 'SPHD',
                  'WEBDV', 'playHD'],
}

WEB_TIERS = {
    'Web_T1': ['ABBIE', 'AJP69', 'APEX', 'PAXA', 'PEXA', 'XEPA', 'BLUTONiUM', 'CasStudio',
               'CMRG', 'CRFW', 'CRUD', 'CtrlHD', 'FLUX', 'GNOME', 'HONE', 'KiNGS', 'Kitsune',
               'monkee', 'NOSiViD', 'NTb', 'NTG', 'QOQ', 'RTN', 'SiC', 'TEPES', 'T6D',
               'TOMMY', 'ViSUM'],
    'Web_T2': ['3cTWeB', 'BTW', 'Cinefeel', 'CiT', 'Coo7', 'dB', 'DEEP', 'END', 'ETHiCS',
               'FC', 'Flights', 'iJP', 'iKA', 'iT00NZ', 'JETIX', 'KHN', 'KiMCHI', 'LAZY',
               'MiU', 'MZABI', 'NPMS', 'NYH', 'orbitron', 'PHOENiX', 'playWEB', 'PSiG',
               'ROCCaT', 'RTFM', 'SA89', 'SbR', 'SDCC', 'SIGMA', 'SMURF', 'SPiRiT',
               'TVSmash', 'WELP', 'XEBEC', '4KBEC', 'CEBEX'],
    'Web_T3': ['BYNDR', 'DRACULA', 'GNOMiSSiON', 'NINJACENTRAL', 'ROCCaT', 'SiGMA',
               'SLiGNOME', 'SwAgLaNdEr', 'T4H', 'ViSiON'],
    'Web_Scene': ['DEFLATE', 'INFLATE'],
}

# Groups that earn a tier on their own, whatever the source term
STANDALONE_TIER_GROUPS = {
    'Remux_T1': ['BMF', 'WiLDCAT'],
    'Bluray_T1': ['BMF'],
}

# Known poor-quality / re-encoding groups, collapsed into one 'BAD' label
BAD_GROUPS = [
    'SWTYBLZ', 'TeeWee', 'Will1869', '24xHD', '41RGB', '4K4U', 'AROMA', 'aXXo', 'AZAZE',
    'BARC0DE', 'BAUCKLEY', 'BdC', 'beAst', 'BTM', 'C1NEM4', 'C4K', 'CDDHD', 'CHAOS',
    'CHD', 'CiNE', 'COLLECTiVE', 'CREATiVE24', 'CrEwSaDe', 'CTFOH', 'd3g', 'DDR', 'DNL',
    'EPiC', 'EuReKA', 'FaNGDiNG0', 'Feranki1980', 'FGT', 'FMD', 'FRDS', 'FZHD',
    'GalaxyRG', 'GHD', 'GPTHD', 'HDS', 'HDTime', 'HDWinG', 'iNTENSO', 'iPlanet', 'iVy',
    'jennaortega', 'JFF', 'KC', 'KiNGDOM', 'KIRA', 'L0SERNIGHT', 'LAMA', 'Leffe',
    'Liber8', 'LiGaS', 'LUCY', 'MarkII', 'MeGusta', 'mHD', 'mSD', 'MTeam', 'MySiLU',
    'NhaNc3', 'nHD', 'nikt0', 'nSD', 'OFT', 'Pahe', 'PATOMiEL', 'PRODJi', 'PSA', 'PTNK',
    'RARBG', 'RDN', 'Rifftrax', 'RU4HD', 'SANTi', 'Scene', 'ShieldBearer',
    'STUTTERSHIT', 'SUNSCREEN', 'TBS', 'TEKNO3D', 'Tigole', 'TIKO', 'VISIONPLUSHDR',
    'WAF', 'WiKi', 'x0r', 'YIFY', 'YTS', 'Zeus',
]

# =============================================================================
# AUDIO LANGUAGE MARKERS
# =============================================================================

AUDIO_MARKER_FRAGMENTS = [
    ('Multi', r'multi'),
    ('Dual Audio', r'dual[ .\-_]?(audio|lang(uage)?|flac|ac3|aac2?)'),
    ('Dubbed', r'dub(bed)?'),
]

LANGUAGE_NAME_FRAGMENTS = [
    ('English', r'english|eng'),
    ('Japanese', r'japanese|jap'),
    ('Chinese', r'chinese|chi'),
    ('Russian', r'russian|rus'),
    ('Spanish', r'spanish|spa|esp'),
    ('French', r'french|fra'),
    ('German', r'german|ger'),
    ('Italian', r'italian|ita'),
    ('Korean', r'korean|kor'),
    ('Hindi', r'hindi|hin'),
    ('Thai', r'thai|tha'),
    ('Vietnamese', r'vietnamese|vie'),
    ('Indonesian', r'indonesian|ind'),
    ('Polish', r'polish|pol'),
    ('Dutch', r'dutch|dut|nl|nederlands|flemish|vlaams|gesproken'),
    ('Danish', r'danish|dan'),
    ('Finnish', r'finnish|fin'),
    ('Swedish', r'swedish|swe'),
    ('Norwegian', r'norwegian|nor'),
    ('Latino', r'latino|lat'),
]

# =============================================================================
# CATEGORY NAMES (also the ClassificationResult field names)
# =============================================================================

RESOLUTION = 'resolution'
QUALITY = 'quality'
VISUAL_TAGS = 'visual_tags'
AUDIO_TAGS = 'audio_tags'
ENCODES = 'encodes'
LANGUAGES = 'languages'

CATEGORY_ORDER = [RESOLUTION, QUALITY, VISUAL_TAGS, AUDIO_TAGS, ENCODES, LANGUAGES]

# =============================================================================
# OVERRIDES / SETTINGS DEFAULTS
# =============================================================================

OVERRIDE_DELIMITER = '<::>'
DEFAULT_MAX_SORT_PATTERNS = 30
DEFAULT_LOG_LEVEL = 'INFO'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

# Environment variable -> settings key
ENV_SETTINGS = {
    'MAX_REGEX_SORT_PATTERNS': 'max_regex_sort_patterns',
    'DEFAULT_REGEX_SORT_PATTERNS': 'regex_sort_patterns',
    'DEFAULT_REGEX_INCLUDE_PATTERN': 'regex_include_pattern',
    'DEFAULT_REGEX_EXCLUDE_PATTERN': 'regex_exclude_pattern',
    'LOG_LEVEL': 'log_level',
}

VIDEO_EXTENSIONS = {'.mkv', '.mp4', '.avi', '.mov', '.m4v', '.mpg',
                    '.mpeg', '.wmv', '.ts', '.m2ts', '.webm'}
