"""Tag catalogs of the search form.

Every catalog is valued by the site's tag id. Tags of any catalog can be
mixed in the include and exclude filters of a search, where each one is
sent as its id.
"""

from enum import Enum


class Tag:
    """Behavior shared by the tag catalogs."""

    @property
    def query_value(self) -> str:
        return str(self.value)

    @property
    def translation_key(self) -> str:
        return f"tags.{self.translation_group}." + self.name.lower().replace("_", "-")

    @classmethod
    def from_value(cls, value: str | int) -> "Tag":
        tag_id = int(value)
        for tag in cls:
            if tag.value == tag_id:
                return tag
        raise ValueError(f"No {cls.__name__} tag with id {value}")


class Genre(Tag, int, Enum):
    """Genre tags."""

    ACTION = 5
    CYBERPUNK = 106
    DRAMA = 8
    ECCHI = 78
    EXPERIMENTAL = 1741
    FANTASY = 22
    HAREM = 130
    HENTAI = 234
    HISTORICAL = 92
    HORROR = 51
    COMEDY = 7
    POLICE = 20
    MAGIC = 18
    MECHA = 98
    REVERSE_HAREM = 263
    MUSIC = 136
    SUPERNATURAL = 19
    DEMENTIA = 97
    SLICE_OF_LIFE = 42
    PARODY = 165
    ADVENTURE = 6
    PSYCHOLOGICAL = 52
    ROMANCE = 2672
    ROMANCE_OLD = 38
    SCIENCE_FICTION = 549
    SHOUJO_AI = 167
    SHOUNEN_AI = 207
    SPACE_OPERA = 384
    SPORTS = 31
    STEAMPUNK = 1734
    SCHOOL = 65
    MARTIAL_ARTS = 57
    MYSTERY = 12
    THRILLER = 53
    MILITARY = 93
    YAOI = 364
    YURI = 380

    @property
    def tag_type(self) -> str:
        return "genre"

    @property
    def translation_group(self) -> str:
        return "genre"


class TargetGroup(Tag, int, Enum):
    """Audience a title is made for."""

    KIDS = 218
    JOSEI = 39
    SEINEN = 48
    SHOUJO = 128
    SHOUNEN = 23

    @property
    def tag_type(self) -> str:
        return "targetgroup"

    @property
    def translation_group(self) -> str:
        return "target-group"


class SourceMaterial(Tag, int, Enum):
    """What the title was adapted from."""

    ANIME = 2314
    GAME = 193
    GAME_OTHER = 2323
    INNE = 2410
    CARD_GAME = 2016
    BOOK = 2029
    LIGHT_NOVEL = 1976
    MANGA = 1956
    FOUR_KOMA_MANGA = 1996
    NOVEL = 2127
    ORIGINAL = 1966
    VISUAL_NOVEL = 1990
    WEB_MANGA = 2025
    WEB_NOVEL = 2872

    @property
    def tag_type(self) -> str:
        return "source"

    @property
    def translation_group(self) -> str:
        return "source-material"

    @property
    def translation_key(self) -> str:
        if self is SourceMaterial.FOUR_KOMA_MANGA:
            return "tags.source-material.4-koma-manga"
        return super().translation_key


class PlaceAndTime(Tag, int, Enum):
    """Setting of the story."""

    ALTERNATIVE_EARTH = 2328
    NORTH_AMERICA = 1789
    OFFICE = 2844
    APARTMENT_LIFE = 2336
    CHINA = 1949
    DUNGEON = 2663
    DYSTOPIA = 2348
    EUROPE = 1745
    FEUDAL_JAPAN = 1730
    LIKE_GAME = 2322
    MEDIEVAL = 2362
    JAPAN = 1740
    CAFE = 2341
    SPACE = 10
    CITY = 1785
    OCEAN = 2363
    OMEGAVERSE = 2875
    TRAVEL = 1788
    POST_APOCALYPTIC = 470
    FUTURE = 2326
    DESERT = 2988
    ALTERNATIVE_WORLD = 2327
    ALL_BOYS_SCHOOL = 2333
    ALL_GIRLS_SCHOOL = 2332
    VIRTUAL_REALITY = 1729
    GREAT_BRITAIN = 2858
    COUNTRYSIDE = 1784
    CONTEMPORARY = 1739
    ISLAND = 2357

    @property
    def tag_type(self) -> str:
        return "place"

    @property
    def translation_group(self) -> str:
        return "place-and-time"


class CharacterType(Tag, int, Enum):
    """Kinds of characters appearing in the title."""

    ACTORS = 2329
    ALBINOS = 2656
    ANDROIDS = 1758
    ANGELS = 1055
    ARTISTS = 1779
    NOBILITY = 1781
    BIFAUXNEN = 2827
    BISHOUJO = 576
    BISHONEN = 1723
    TWINS = 2957
    GODS = 1805
    CGDCT = 2950
    CHIBI = 569
    CHUUNIBYOU = 1842
    CYBORGS = 1726
    SORCERERS = 1922
    DANDERE_KUUDERE = 1783
    DELINQUENTS = 2347
    DEMONS = 104
    DERE_DERE = 2174
    DETECTIVES = 256
    DOCTORS = 2217
    ADULTS = 1760
    GHOSTS = 1731
    KIDS = 1737
    EXORCISTS = 1804
    ELVES = 1762
    FURRY = 2860
    FUTANARI = 2116
    GAR = 1797
    GENIUS = 2755
    GENKI = 2213
    GAMERS = 2325
    GYARU = 1807
    HETEROCHROMIA = 2681
    HIKIKOMORI = 2308
    HYBRID = 2146
    IDOLS = 352
    YOUNGER_SISTERS = 1787
    INSECTS = 2356
    PRIESTS = 1780
    WAITER_WAITRESS = 2935
    KEMONOMIMI = 1742
    KITSUNE = 2373
    ALIENS = 421
    CATS = 594
    DWARVES = 2864
    BUTLERS = 1232
    LOLI = 296
    MAGICAL = 1800
    MAHOU_SHOUJO = 173
    MAYADERE = 2005
    MEGANEKKO = 2214
    MOE = 519
    MURDERERS = 1902
    TALKING_ANIMALS = 1905
    TEENAGERS = 2226
    MERCENARIES = 1916
    TEACHERS = 1820
    NEET = 2190
    NEKOMATA = 2650
    DISABLED = 2831
    SLAVES = 2180
    NINJA = 59
    BODYGUARDS = 2338
    GLASSES_WEARERS = 2853
    OVERPOWERED = 2264
    OTAKU = 260
    YOUNGER_BROTHERS = 2306
    PIRATES = 62
    MAIDS = 1747
    POLICE_OFFICERS = 2222
    MONSTERS = 1727
    OFFICE_WORKERS = 1782
    CRIMINALS = 1778
    ROBOTS = 1733
    SPLIT_PERSONALITY = 2874
    KNIGHTS = 1923
    SAMURAI = 108
    SHINIGAMI = 269
    ORPHANS = 2364
    SLIME = 2751
    DRAGONS = 1725
    STUDENTS = 1875
    SUCCUBI = 2839
    SUPERHEROES = 2369
    MERMAIDS = 496
    SKELETONS = 2949
    SPIES = 2181
    TENGU = 2626
    TRANSVESTITE = 2254
    TSUNDERE = 1759
    PUPILS = 1819
    VILLAINESS = 2977
    VAMPIRES = 83
    WITCHES = 1728
    WEREWOLVES = 2044
    FAIRIES = 387
    DEMON_LORD = 2383
    YANDERE_YANGIRE = 1755
    YOUKAI = 1744
    GENDER_BENDER = 956
    ZOMBIES = 1075
    SOLDIERS = 2157
    ANIMALS = 2632
    BOUNTY_HUNTERS = 1761

    @property
    def tag_type(self) -> str:
        return "entity"

    @property
    def translation_group(self) -> str:
        return "character-type"


class ProductionType(Tag, int, Enum):
    """Production traits."""

    GRAPHICS_2_5D = 2658
    ANIMATION_3D = 2617
    CHINESE_ANIMATION = 2343
    KOREAN_ANIMATION = 2634
    ANTHOLOGY = 2747
    NO_DIALOGUES = 2743
    CHINESE_JAPANESE_COPRODUCTION = 2604
    BLACK_AND_WHITE = 2819
    DOUJINSHI = 1178
    REAL_SCENERY = 2660
    EPISODIC = 2646
    PICTURE_DRAMA = 2683
    VERTICAL_ANIME = 2637
    ADVERTISEMENT = 2753
    FULL_COLOR = 2418
    WEBNOVEL = 2878
    WEBTOON = 2877
    PRINTED_EDITION = 2879
    PUBLISHED_IN_POLAND = 2665
    YONKOMA = 1884
    YOUNG_ANIMATOR_TRAINING_PROJECT = 2644

    @property
    def tag_type(self) -> str:
        return "productiontype"

    @property
    def translation_group(self) -> str:
        return "production-type"


class Other(Tag, int, Enum):
    """Themes outside the other catalogs."""

    ALCHEMY = 450
    AMNESIA = 1901
    BASEBALL = 506
    BOXING = 67
    COLD_WEAPON = 2865
    FIREARM = 2155
    BUDDHIST = 2361
    ILLNESS = 2355
    CROSSDRESSING = 2346
    DEATH_GAME = 1933
    BODY_SHARING = 2339
    EDUCATIONAL = 558
    ECONOMY = 1763
    HUMAN_EXPERIMENTATION = 2354
    CONTEMPORARY_FANTASY = 2345
    PHOTOGRAPHY = 2862
    GUILDS = 2351
    GYMNASTICS = 2714
    GOLF = 2934
    GORE = 2050
    HIGH_STAKES = 2377
    CARD_GAMES = 1904
    GAMBLING = 2350
    ISEKAI = 2376
    IYASHIKEI = 2358
    CANNIBALISM = 2739
    INCEST = 383
    KENDO = 554
    SCHOOL_CLUB = 2765
    CYCLING = 1947
    MARRIAGE_CONTRACT = 2978
    BASKETBALL = 225
    CULINARY = 1803
    AVIATION = 1749
    MAFIA = 513
    MAHJONG = 357
    TIME_AND_SPACE_MANIPULATION = 1840
    CHRISTIAN_MYTHOLOGY = 2360
    JAPANESE_MYTHOLOGY = 2359
    ABOUT_GAME = 2324
    CHILDCARE = 2342
    MASTER_SERVANT_RELATIONSHIP = 2770
    PANTY_SHOTS = 2365
    FOOTBALL = 32
    TRAINS = 2370
    TIME_TRAVEL = 2731
    POLITICS = 2826
    VIOLENCE = 1736
    REINCARNATION = 2367
    AGRICULTURE = 2331
    CARS = 47
    STUDENT_COUNCIL = 2411
    SEX = 1786
    SHOGI = 2824
    VOLLEYBALL = 2216
    CONSPIRACY = 2344
    BATTLE_SUITS = 3026
    GUNFIGHTS = 2352
    SUPER_POWER = 58
    DANCE = 2318
    TATTOOS = 2750
    TENNIS = 66
    LOVE_TRIANGLE = 1743
    HAND_TO_HAND_COMBAT = 2353
    ROMANTIC_PLOT = 2674
    WAR = 1962
    SEXUAL_ABUSE = 2368
    EXPLICIT_SEX = 2349
    CAR_RACING = 1903
    YAKUZA = 1089
    ARRANGED_MARRIAGE = 2337
    BODY_SWAPPING = 1732
    REVENGE = 2145
    ANIMAL_ABUSE = 2334
    BULLYING = 2340
    AFTERLIFE = 2330
    ARCHERY = 2335
    SKATING = 2153

    @property
    def tag_type(self) -> str:
        return "tag"

    @property
    def translation_group(self) -> str:
        return "other"


TAG_CATALOGS: tuple[type[Tag], ...] = (
    Genre,
    TargetGroup,
    SourceMaterial,
    PlaceAndTime,
    CharacterType,
    ProductionType,
    Other,
)
