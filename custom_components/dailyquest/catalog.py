# File: catalog.py
"""Static reference data for Daily Quest.

Daily goals, the mission pool, badge metadata, the achievement ladders and the
XP level table. Everything here is immutable at runtime; engines receive these
definitions as arguments and the tracker looks them up by id.

The level table is the single source of truth for both level recomputation and
display. ``validate_catalog`` checks the structural rules the engines rely on.
"""

from __future__ import annotations

from dataclasses import dataclass

from . import const


@dataclass(frozen=True, slots=True)
class GoalDefinition:
    """A fixed daily goal."""

    goal_id: str
    icon: str
    title: str
    target: int
    unit: str
    kind: str  # const.GOAL_KIND_COUNTER | const.GOAL_KIND_CHECKBOX

    @property
    def is_counter(self) -> bool:
        """Return True for numeric goals."""
        return self.kind == const.GOAL_KIND_COUNTER

    @property
    def max_value(self) -> int:
        """Upper clamp for counter values."""
        return self.target * const.GOAL_COUNTER_CAP_MULTIPLIER


@dataclass(frozen=True, slots=True)
class MissionDefinition:
    """A candidate mission in the daily pool."""

    mission_id: str
    icon: str
    title: str
    description: str


@dataclass(frozen=True, slots=True)
class BadgeDefinition:
    """Display metadata for goal and combo badges."""

    icon: str
    name: str


@dataclass(frozen=True, slots=True)
class AchievementLevel:
    """One rung of an achievement ladder."""

    threshold: int
    reward: str


@dataclass(frozen=True, slots=True)
class AchievementDefinition:
    """A multi-level achievement driven by a metric over the whole history."""

    achievement_id: str
    name: str
    icon: str
    description: str
    goal_text: str
    metric: str  # const.ACHIEVEMENT_METRIC_*
    goal_id: str | None
    levels: tuple[AchievementLevel, ...]


@dataclass(frozen=True, slots=True)
class LevelDefinition:
    """XP level threshold (total XP needed) and its title."""

    level: int
    threshold: int
    title: str


# ==============================================================================
# Daily goals
# ==============================================================================

DAILY_GOALS: dict[str, GoalDefinition] = {
    "water": GoalDefinition(
        "water", "💧", "Drink Water", 8, "cups", const.GOAL_KIND_COUNTER
    ),
    "stretch": GoalDefinition(
        "stretch", "🧘", "Stretch", 15, "minutes", const.GOAL_KIND_COUNTER
    ),
    "duolingo": GoalDefinition(
        "duolingo", "🦉", "Duolingo", 1, "lesson", const.GOAL_KIND_CHECKBOX
    ),
    "reading": GoalDefinition(
        "reading", "📚", "Reading", 30, "minutes", const.GOAL_KIND_COUNTER
    ),
}

# ==============================================================================
# Mission pool (3 are picked per day, see MissionEngine)
# ==============================================================================

DAILY_MISSIONS: tuple[MissionDefinition, ...] = (
    MissionDefinition(
        "vegetables",
        "🥕",
        "Veggie Champion",
        "Eat all your vegetables at dinner",
    ),
    MissionDefinition(
        "pushups",
        "💪",
        "Strong Arms",
        "Do 10 push-ups (or as many as you can!)",
    ),
    MissionDefinition(
        "kitchen_help",
        "🧹",
        "Kitchen Helper",
        "Help clean up after a meal",
    ),
    MissionDefinition(
        "outdoor_time",
        "🌳",
        "Nature Explorer",
        "Spend 20 minutes outside",
    ),
    MissionDefinition(
        "friend_call",
        "📞",
        "Social Butterfly",
        "Call or video chat with a friend or family member",
    ),
    MissionDefinition(
        "creative_time",
        "🎨",
        "Creative Soul",
        "Draw, paint, or do a craft project for 15 minutes",
    ),
    MissionDefinition(
        "music_time",
        "🎵",
        "Music Maker",
        "Play an instrument or sing for 10 minutes",
    ),
    MissionDefinition(
        "organize",
        "📦",
        "Tidy Master",
        "Organize your desk or a drawer",
    ),
    MissionDefinition(
        "gratitude",
        "🙏",
        "Grateful Heart",
        "Write down 3 things you're grateful for",
    ),
    MissionDefinition(
        "learn_fact",
        "🧠",
        "Fun Fact Finder",
        "Learn one interesting fact about something new",
    ),
    MissionDefinition(
        "help_family",
        "❤️",
        "Family Helper",
        "Do something nice for a family member",
    ),
    MissionDefinition(
        "walk",
        "🚶",
        "Step Counter",
        "Take a 15-minute walk around your neighborhood",
    ),
    MissionDefinition(
        "journal",
        "📔",
        "Story Teller",
        "Write about your day for 5 minutes",
    ),
    MissionDefinition(
        "teeth_care",
        "🦷",
        "Pearly Whites",
        "Brush your teeth extra well tonight",
    ),
    MissionDefinition(
        "room_clean",
        "🛏️",
        "Room Ranger",
        "Make your bed and tidy up your room",
    ),
    MissionDefinition("dance", "💃", "Dance Party", "Dance to your favorite song"),
    MissionDefinition(
        "meditate",
        "🧘‍♀️",
        "Zen Master",
        "Sit quietly and breathe deeply for 5 minutes",
    ),
    MissionDefinition(
        "compliment",
        "😊",
        "Kind Words",
        "Give someone a genuine compliment",
    ),
    MissionDefinition(
        "board_game",
        "🎲",
        "Game Master",
        "Play a board game or card game with family",
    ),
    MissionDefinition(
        "healthy_snack",
        "🍎",
        "Smart Snacker",
        "Choose a healthy snack instead of junk food",
    ),
    MissionDefinition(
        "early_bed",
        "😴",
        "Sleep Champion",
        "Go to bed 15 minutes earlier than usual",
    ),
    MissionDefinition(
        "no_phone",
        "📱",
        "Digital Detox",
        "Take a 30-minute break from screens",
    ),
    MissionDefinition(
        "jumping_jacks",
        "🏃‍♂️",
        "Energy Booster",
        "Do 25 jumping jacks to get your heart pumping",
    ),
    MissionDefinition(
        "fruit_power",
        "🍓",
        "Fruit Power",
        "Eat two different types of fruit today",
    ),
    MissionDefinition(
        "deep_breaths",
        "🌬️",
        "Breath Master",
        "Take 10 deep breaths when you feel stressed",
    ),
    MissionDefinition(
        "origami",
        "🦢",
        "Paper Artist",
        "Make an origami animal or flower",
    ),
    MissionDefinition(
        "story_write",
        "✍️",
        "Story Creator",
        "Write a short story with exactly 50 words",
    ),
    MissionDefinition(
        "photo_take",
        "📸",
        "Photographer",
        "Take 5 creative photos of ordinary objects",
    ),
    MissionDefinition(
        "new_word",
        "📖",
        "Word Wizard",
        "Learn a new word and use it in conversation",
    ),
    MissionDefinition(
        "poem_write",
        "📝",
        "Poet Laureate",
        "Write a haiku about your day",
    ),
    MissionDefinition(
        "doodle_time",
        "✏️",
        "Doodle Master",
        "Fill a page with fun doodles and patterns",
    ),
    MissionDefinition(
        "riddle_solve",
        "🧩",
        "Riddle Solver",
        "Solve three riddles or brain teasers",
    ),
    MissionDefinition(
        "random_kindness",
        "💝",
        "Random Kindness",
        "Do one unexpected act of kindness",
    ),
    MissionDefinition(
        "thank_you_note",
        "💌",
        "Grateful Writer",
        "Write a thank you note to someone special",
    ),
    MissionDefinition(
        "smile_spread",
        "😄",
        "Smile Spreader",
        "Make 5 people smile today",
    ),
    MissionDefinition(
        "hug_give",
        "🤗",
        "Hug Ambassador",
        "Give 3 genuine hugs to people you care about",
    ),
    MissionDefinition(
        "meal_prep",
        "🥪",
        "Chef Helper",
        "Help prepare lunch or a snack",
    ),
    MissionDefinition(
        "laundry_fold",
        "👕",
        "Laundry Assistant",
        "Fold and put away your clean clothes",
    ),
    MissionDefinition(
        "schedule_plan",
        "📅",
        "Planning Pro",
        "Plan tomorrow's activities and priorities",
    ),
    MissionDefinition(
        "joke_learn",
        "😂",
        "Comedy Star",
        "Learn a new joke and tell it to someone",
    ),
    MissionDefinition(
        "magic_trick",
        "🎩",
        "Magician",
        "Learn and perform a simple magic trick",
    ),
    MissionDefinition(
        "tongue_twister",
        "👅",
        "Tongue Twister Pro",
        "Master saying a difficult tongue twister",
    ),
    MissionDefinition(
        "scavenger_hunt",
        "🔍",
        "Treasure Hunter",
        "Find 5 red things in your house",
    ),
    MissionDefinition(
        "balance_challenge",
        "⚖️",
        "Balance Master",
        "Stand on one foot for 30 seconds",
    ),
    MissionDefinition(
        "bird_watch",
        "🐦",
        "Bird Watcher",
        "Spot and identify 3 different birds",
    ),
    MissionDefinition(
        "cloud_shapes",
        "☁️",
        "Cloud Reader",
        "Find shapes in the clouds for 10 minutes",
    ),
    MissionDefinition(
        "garden_explore",
        "🌻",
        "Garden Explorer",
        "Examine flowers, leaves, or insects closely",
    ),
    MissionDefinition(
        "sunset_watch",
        "🌅",
        "Sunset Appreciator",
        "Watch the sunrise or sunset mindfully",
    ),
    MissionDefinition(
        "typing_practice",
        "⌨️",
        "Typing Ninja",
        "Practice typing for 10 minutes",
    ),
    MissionDefinition(
        "memory_game",
        "🧠",
        "Memory Champion",
        "Play a memory game or do mental math",
    ),
    MissionDefinition(
        "future_self",
        "🔮",
        "Future Thinker",
        "Write a letter to your future self",
    ),
    MissionDefinition(
        "proud_moment",
        "🌟",
        "Pride Keeper",
        "Write about something that made you proud today",
    ),
    MissionDefinition(
        "fear_face",
        "🦁",
        "Courage Builder",
        "Do one small thing that scares you",
    ),
    MissionDefinition(
        "interview_elder",
        "👴",
        "Story Collector",
        "Ask an older person about their childhood",
    ),
    MissionDefinition(
        "map_draw",
        "🧭",
        "Cartographer",
        "Draw a map of your neighborhood or room",
    ),
    MissionDefinition(
        "weather_predict",
        "🌤️",
        "Weather Prophet",
        "Predict tomorrow's weather and check if you're right",
    ),
    MissionDefinition(
        "star_gaze",
        "⭐",
        "Star Gazer",
        "Look at stars and try to find constellations",
    ),
    MissionDefinition(
        "shadow_play",
        "👥",
        "Shadow Artist",
        "Make shadow puppets and tell a story",
    ),
    MissionDefinition(
        "color_hunt",
        "🌈",
        "Rainbow Hunter",
        "Find objects in all colors of the rainbow",
    ),
)

# ==============================================================================
# Badge metadata (mission badges use the mission's own icon and title)
# ==============================================================================

GOAL_BADGES: dict[str, BadgeDefinition] = {
    "water": BadgeDefinition("💧", "Hydration Hero"),
    "stretch": BadgeDefinition("🧘", "Flexibility Star"),
    "duolingo": BadgeDefinition("🦉", "Language Learner"),
    "reading": BadgeDefinition("📚", "Book Worm"),
}

COMBO_BADGES: dict[str, BadgeDefinition] = {
    const.COMBO_BADGE_PERFECT_DAY: BadgeDefinition("⭐", "Perfect Day"),
    const.COMBO_BADGE_GOAL_MASTER: BadgeDefinition("🎯", "Goal Master"),
    const.COMBO_BADGE_MISSION_HERO: BadgeDefinition("🎖️", "Mission Hero"),
}

# ==============================================================================
# Achievements
# ==============================================================================

ACHIEVEMENTS: tuple[AchievementDefinition, ...] = (
    AchievementDefinition(
        achievement_id="water_hero",
        name="Water Hero",
        icon="🌊",
        description="Total cups of water consumed",
        goal_text="8 cups daily",
        metric=const.ACHIEVEMENT_METRIC_GOAL_TOTAL,
        goal_id="water",
        levels=(
            AchievementLevel(8, "First Sip"),
            AchievementLevel(24, "Hydration Starter"),
            AchievementLevel(48, "Water Walker"),
            AchievementLevel(80, "Droplet Collector"),
            AchievementLevel(120, "Stream Walker"),
            AchievementLevel(200, "River Runner"),
            AchievementLevel(300, "Lake Legend"),
            AchievementLevel(450, "Ocean Master"),
            AchievementLevel(650, "Tsunami Tamer"),
            AchievementLevel(900, "Water Bender"),
            AchievementLevel(1200, "Hydration God"),
            AchievementLevel(1600, "Aqua Supreme"),
            AchievementLevel(2100, "H2O Immortal"),
            AchievementLevel(2700, "Water Deity"),
            AchievementLevel(3400, "Ocean Emperor"),
            AchievementLevel(4200, "Hydration Master"),
            AchievementLevel(5100, "Water Legend"),
            AchievementLevel(6100, "Aqua Immortal"),
            AchievementLevel(7200, "H2O God"),
            AchievementLevel(8400, "Water Supreme"),
        ),
    ),
    AchievementDefinition(
        achievement_id="reading_master",
        name="Reading Master",
        icon="📖",
        description="Total minutes of reading",
        goal_text="30 minutes daily",
        metric=const.ACHIEVEMENT_METRIC_GOAL_TOTAL,
        goal_id="reading",
        levels=(
            AchievementLevel(30, "First Page"),
            AchievementLevel(90, "Reading Starter"),
            AchievementLevel(180, "Page Turner"),
            AchievementLevel(300, "Chapter Champion"),
            AchievementLevel(450, "Book Browser"),
            AchievementLevel(750, "Story Seeker"),
            AchievementLevel(1200, "Novel Navigator"),
            AchievementLevel(1800, "Literature Lover"),
            AchievementLevel(2700, "Reading Royalty"),
            AchievementLevel(4000, "Book Deity"),
            AchievementLevel(6000, "Word Wizard"),
            AchievementLevel(9000, "Story Sage"),
            AchievementLevel(13000, "Reading Master"),
            AchievementLevel(18000, "Book Legend"),
            AchievementLevel(24000, "Literature God"),
            AchievementLevel(31000, "Reading Immortal"),
            AchievementLevel(39000, "Word Supreme"),
            AchievementLevel(48000, "Story Master"),
            AchievementLevel(58000, "Book Emperor"),
            AchievementLevel(69000, "Reading Supreme"),
        ),
    ),
    AchievementDefinition(
        achievement_id="stretch_guru",
        name="Stretch Guru",
        icon="🤸",
        description="Total minutes of stretching",
        goal_text="15 minutes daily",
        metric=const.ACHIEVEMENT_METRIC_GOAL_TOTAL,
        goal_id="stretch",
        levels=(
            AchievementLevel(15, "First Stretch"),
            AchievementLevel(45, "Stretch Starter"),
            AchievementLevel(90, "Flexibility Finder"),
            AchievementLevel(150, "Bend Builder"),
            AchievementLevel(225, "Pose Professional"),
            AchievementLevel(375, "Flexibility Master"),
            AchievementLevel(600, "Stretch Superstar"),
            AchievementLevel(900, "Yoga Yogi"),
            AchievementLevel(1350, "Zen Warrior"),
            AchievementLevel(1950, "Balance Boss"),
            AchievementLevel(2700, "Flexibility Phoenix"),
            AchievementLevel(3600, "Stretch Master"),
            AchievementLevel(4650, "Yoga Legend"),
            AchievementLevel(5850, "Flexibility God"),
            AchievementLevel(7200, "Stretch Immortal"),
            AchievementLevel(8700, "Yoga Supreme"),
            AchievementLevel(10350, "Flexibility Emperor"),
            AchievementLevel(12150, "Stretch Legend"),
            AchievementLevel(14100, "Yoga Master"),
            AchievementLevel(16200, "Flexibility Supreme"),
        ),
    ),
    AchievementDefinition(
        achievement_id="language_legend",
        name="Language Legend",
        icon="🗣️",
        description="Days of completing Duolingo",
        goal_text="1 lesson daily",
        metric=const.ACHIEVEMENT_METRIC_GOAL_DAYS,
        goal_id="duolingo",
        levels=(
            AchievementLevel(1, "First Lesson"),
            AchievementLevel(3, "Language Starter"),
            AchievementLevel(7, "Word Warrior"),
            AchievementLevel(14, "Language Learner"),
            AchievementLevel(21, "Vocabulary Victor"),
            AchievementLevel(30, "Grammar Guardian"),
            AchievementLevel(45, "Fluency Fighter"),
            AchievementLevel(60, "Polyglot Pro"),
            AchievementLevel(80, "Language Lord"),
            AchievementLevel(100, "Tongue Twister"),
            AchievementLevel(125, "Babel Builder"),
            AchievementLevel(150, "Universal Speaker"),
            AchievementLevel(180, "Language Master"),
            AchievementLevel(210, "Word Legend"),
            AchievementLevel(245, "Grammar God"),
            AchievementLevel(280, "Fluency Immortal"),
            AchievementLevel(320, "Polyglot Supreme"),
            AchievementLevel(365, "Language Emperor"),
            AchievementLevel(400, "Tongue Master"),
            AchievementLevel(450, "Babel Supreme"),
        ),
    ),
    AchievementDefinition(
        achievement_id="mission_master",
        name="Mission Master",
        icon="🎯",
        description="Total missions completed",
        goal_text="3 missions daily",
        metric=const.ACHIEVEMENT_METRIC_MISSIONS_TOTAL,
        goal_id=None,
        levels=(
            AchievementLevel(3, "First Mission"),
            AchievementLevel(9, "Mission Starter"),
            AchievementLevel(18, "Task Tackler"),
            AchievementLevel(30, "Mission Rookie"),
            AchievementLevel(45, "Quest Completer"),
            AchievementLevel(75, "Challenge Champion"),
            AchievementLevel(120, "Mission Expert"),
            AchievementLevel(180, "Quest Master"),
            AchievementLevel(270, "Mission Legend"),
            AchievementLevel(400, "Ultimate Achiever"),
            AchievementLevel(600, "Mission Immortal"),
            AchievementLevel(900, "Quest God"),
            AchievementLevel(1350, "Mission Supreme"),
            AchievementLevel(2000, "Quest Emperor"),
            AchievementLevel(3000, "Mission Master"),
            AchievementLevel(4500, "Quest Legend"),
            AchievementLevel(6750, "Mission God"),
            AchievementLevel(10000, "Quest Immortal"),
            AchievementLevel(15000, "Mission Supreme"),
            AchievementLevel(22500, "Quest Master"),
        ),
    ),
    AchievementDefinition(
        achievement_id="perfect_days",
        name="Perfect Days",
        icon="✨",
        description="Days with all goals and missions complete",
        goal_text="All goals + missions daily",
        metric=const.ACHIEVEMENT_METRIC_PERFECT_DAYS,
        goal_id=None,
        levels=(
            AchievementLevel(1, "Perfect Starter"),
            AchievementLevel(3, "Excellence Seeker"),
            AchievementLevel(7, "Perfection Pro"),
            AchievementLevel(14, "Flawless Fighter"),
            AchievementLevel(21, "Perfect Master"),
            AchievementLevel(30, "Excellence Expert"),
            AchievementLevel(45, "Perfection Legend"),
            AchievementLevel(60, "Flawless God"),
            AchievementLevel(80, "Perfect Immortal"),
            AchievementLevel(100, "Ultimate Perfect"),
            AchievementLevel(125, "Excellence Supreme"),
            AchievementLevel(150, "Perfection Emperor"),
            AchievementLevel(180, "Flawless Master"),
            AchievementLevel(210, "Perfect Legend"),
            AchievementLevel(250, "Excellence God"),
            AchievementLevel(300, "Perfection Immortal"),
            AchievementLevel(365, "Flawless Supreme"),
            AchievementLevel(450, "Perfect Emperor"),
            AchievementLevel(550, "Excellence Master"),
            AchievementLevel(700, "Perfection Supreme"),
        ),
    ),
)

# ==============================================================================
# XP levels
# ==============================================================================

XP_LEVELS: tuple[LevelDefinition, ...] = (
    LevelDefinition(1, 0, "Rookie"),
    LevelDefinition(2, 100, "Apprentice"),
    LevelDefinition(3, 200, "Scout"),
    LevelDefinition(4, 350, "Adventurer"),
    LevelDefinition(5, 500, "Pathfinder"),
    LevelDefinition(6, 700, "Challenger"),
    LevelDefinition(7, 900, "Explorer"),
    LevelDefinition(8, 1150, "Warrior"),
    LevelDefinition(9, 1400, "Champion"),
    LevelDefinition(10, 1700, "Hero"),
    LevelDefinition(11, 2000, "Knight"),
    LevelDefinition(12, 2350, "Guardian"),
    LevelDefinition(13, 2700, "Crusader"),
    LevelDefinition(14, 3100, "Master"),
    LevelDefinition(15, 3500, "Grandmaster"),
    LevelDefinition(16, 3950, "Legend"),
    LevelDefinition(17, 4400, "Mythic"),
    LevelDefinition(18, 4900, "Dragonlord"),
    LevelDefinition(19, 5400, "Infinity"),
    LevelDefinition(20, 6000, "Eternal"),
    LevelDefinition(21, 6600, "Celestial"),
    LevelDefinition(22, 7250, "Starborn"),
    LevelDefinition(23, 7900, "Moonblade"),
    LevelDefinition(24, 8600, "Sunseeker"),
    LevelDefinition(25, 9300, "Skybreaker"),
    LevelDefinition(26, 10100, "Stormcaller"),
    LevelDefinition(27, 10900, "Flamekeeper"),
    LevelDefinition(28, 11800, "Shadowstalker"),
    LevelDefinition(29, 12700, "Lightbringer"),
    LevelDefinition(30, 13700, "Timewalker"),
    LevelDefinition(31, 14700, "Voidstrider"),
    LevelDefinition(32, 15800, "Dreamweaver"),
    LevelDefinition(33, 16900, "Spiritbinder"),
    LevelDefinition(34, 18100, "Realmkeeper"),
    LevelDefinition(35, 19300, "Cosmic Sage"),
    LevelDefinition(36, 20600, "Fateweaver"),
    LevelDefinition(37, 21900, "Infinity Knight"),
    LevelDefinition(38, 23300, "Eclipse Lord"),
    LevelDefinition(39, 24700, "Starforged"),
    LevelDefinition(40, 26200, "Planar Champion"),
    LevelDefinition(41, 27700, "Reality Shaper"),
    LevelDefinition(42, 29300, "Eternal Flame"),
    LevelDefinition(43, 30900, "Galaxy Guardian"),
    LevelDefinition(44, 32600, "Dimension Walker"),
    LevelDefinition(45, 34300, "Universal Hero"),
    LevelDefinition(46, 36100, "Cosmic Titan"),
    LevelDefinition(47, 37900, "Mythborn Legend"),
    LevelDefinition(48, 39800, "Ascendant"),
    LevelDefinition(49, 41700, "Transcendent"),
    LevelDefinition(50, 43700, "Omniversal Eternal"),
)

MAX_LEVEL: int = XP_LEVELS[-1].level

_MISSIONS_BY_ID: dict[str, MissionDefinition] = {
    mission.mission_id: mission for mission in DAILY_MISSIONS
}
_ACHIEVEMENTS_BY_ID: dict[str, AchievementDefinition] = {
    achievement.achievement_id: achievement for achievement in ACHIEVEMENTS
}
_LEVELS_BY_NUMBER: dict[int, LevelDefinition] = {
    level.level: level for level in XP_LEVELS
}


def get_goal(goal_id: str) -> GoalDefinition | None:
    """Return the goal definition or None."""
    return DAILY_GOALS.get(goal_id)


def get_mission(mission_id: str) -> MissionDefinition | None:
    """Return the mission definition or None."""
    return _MISSIONS_BY_ID.get(mission_id)


def get_achievement(achievement_id: str) -> AchievementDefinition | None:
    """Return the achievement definition or None."""
    return _ACHIEVEMENTS_BY_ID.get(achievement_id)


def get_level(level: int) -> LevelDefinition | None:
    """Return the level definition or None when out of range."""
    return _LEVELS_BY_NUMBER.get(level)


def validate_catalog(
    goals: dict[str, GoalDefinition] | None = None,
    missions: tuple[MissionDefinition, ...] | None = None,
    achievements: tuple[AchievementDefinition, ...] | None = None,
    levels: tuple[LevelDefinition, ...] | None = None,
) -> dict[str, str]:
    """Check the structural rules the engines depend on.

    Defaults to the module catalog. Returns a dict of error key -> message,
    empty when the catalog is consistent.
    """
    goals = DAILY_GOALS if goals is None else goals
    missions = DAILY_MISSIONS if missions is None else missions
    achievements = ACHIEVEMENTS if achievements is None else achievements
    levels = XP_LEVELS if levels is None else levels

    errors: dict[str, str] = {}

    for key, goal in goals.items():
        if key != goal.goal_id:
            errors[f"goal_{key}"] = (
                f"Goal key '{key}' does not match id '{goal.goal_id}'"
            )
        if goal.kind not in const.GOAL_KINDS:
            errors[f"goal_{key}_kind"] = f"Unknown goal kind '{goal.kind}'"
        if goal.target <= 0:
            errors[f"goal_{key}_target"] = "Goal target must be positive"
        if key not in GOAL_BADGES:
            errors[f"goal_{key}_badge"] = f"No badge metadata for goal '{key}'"

    seen_missions: set[str] = set()
    for mission in missions:
        if mission.mission_id in seen_missions:
            errors[f"mission_{mission.mission_id}"] = "Duplicate mission id"
        if mission.mission_id in goals:
            errors[f"mission_{mission.mission_id}_collision"] = (
                "Mission id collides with a goal id"
            )
        seen_missions.add(mission.mission_id)

    seen_achievements: set[str] = set()
    for achievement in achievements:
        key = achievement.achievement_id
        if key in seen_achievements:
            errors[f"achievement_{key}"] = "Duplicate achievement id"
        seen_achievements.add(key)
        if not achievement.levels:
            errors[f"achievement_{key}_levels"] = "Achievement has no levels"
        thresholds = [level.threshold for level in achievement.levels]
        if any(b <= a for a, b in zip(thresholds, thresholds[1:])):
            errors[f"achievement_{key}_thresholds"] = (
                "Thresholds must be strictly increasing"
            )
        if achievement.metric in (
            const.ACHIEVEMENT_METRIC_GOAL_TOTAL,
            const.ACHIEVEMENT_METRIC_GOAL_DAYS,
        ) and achievement.goal_id not in goals:
            errors[f"achievement_{key}_goal"] = (
                f"Unknown goal '{achievement.goal_id}' for goal metric"
            )

    if not levels or levels[0].level != 1 or levels[0].threshold != 0:
        errors["levels_start"] = "Level 1 must exist with threshold 0"
    for previous, current in zip(levels, levels[1:]):
        if current.level != previous.level + 1:
            errors[f"level_{current.level}"] = "Levels must be consecutive"
        if current.threshold <= previous.threshold:
            errors[f"level_{current.level}_threshold"] = (
                "Level thresholds must be strictly increasing"
            )
    for level in levels:
        if not level.title:
            errors[f"level_{level.level}_title"] = "Level has no title"

    return errors
