"""Fixed text corpus for insights.

Every collection here has a fixed size and order; generators index into it
with seeded positions, so changing the order changes the readings.
"""

from __future__ import annotations

from ..models import AspectType, CycleInfluence
from ..zodiac import ZodiacSign

A = AspectType
S = ZodiacSign

STEADY_DAY = "A steady day for internal processing. Notice what surfaces without forcing anything."

# Transiting Moon to a natal personal body, keyed by (natal body, aspect).
MOON_ASPECT_TEXTS = {
    ("Sun", A.CONJUNCTION): (
        "A fresh emotional start as the Moon meets your Sun. Head and heart agree today, "
        "so decisions feel cleaner than usual. Begin something that matters to you."
    ),
    ("Sun", A.SQUARE): (
        "What you need and what you want to show the world pull in different directions. "
        "Let the friction sit without forcing an answer; it points at what matters."
    ),
    ("Sun", A.OPPOSITION): (
        "Feelings run high and ask for attention. Others may press on sore spots, "
        "but they are only mirroring something you are ready to acknowledge."
    ),
    ("Sun", A.TRINE): (
        "You are in step with yourself today. Being true to yourself and being practical "
        "point the same way, so enjoy the ease."
    ),
    ("Moon", A.CONJUNCTION): (
        "An emotional reset. The Moon returns to its natal place and shows you what you "
        "actually need, not what you have been telling yourself you need."
    ),
    ("Moon", A.SQUARE): (
        "An old habit surfaces through irritation. The annoyance is connected to a deeper "
        "pattern that is ready to shift, so get curious rather than pushing it away."
    ),
    ("Moon", A.OPPOSITION): (
        "Something that has been building comes to a head. Let yourself feel it instead "
        "of analysing it away; release is the healthy move."
    ),
    ("Moon", A.TRINE): (
        "Comfortable in your own skin. Your needs and your circumstances cooperate, "
        "which makes this a day to be rather than to prove."
    ),
    ("Venus", A.CONJUNCTION): (
        "What you love and what you need line up. Pleasure, connection and creative work "
        "come naturally, so choose what brings genuine joy."
    ),
    ("Venus", A.SQUARE): (
        "Security and desire argue with each other. One part of you wants comfort, another "
        "wants change. Both needs are valid and each shows you something."
    ),
    ("Venus", A.TRINE): (
        "Relationships feel easy rather than demanding. Appreciate what already works "
        "and enjoy simple pleasures without guilt."
    ),
    ("Mars", A.CONJUNCTION): (
        "Emotion becomes fuel. You are ready to fight for what you need; aim it at bold "
        "steps, not at whoever happens to be nearby."
    ),
    ("Mars", A.SQUARE): (
        "Frustration is looking for an outlet and patience is thin. Before reacting, ask "
        "what you are really frustrated about and put the heat into action."
    ),
    ("Mars", A.TRINE): (
        "Healthy assertion. You know what you need and can ask for it without pushing, "
        "which makes this a good day for difficult conversations."
    ),
    ("Mercury", A.CONJUNCTION): (
        "Thoughts and feelings sync up, so putting experience into words is easier than "
        "usual. Write, talk it through, or share what you have been processing."
    ),
    ("Mercury", A.SQUARE): (
        "Head and heart disagree. Do not force them to match; understanding why they "
        "differ is more useful than picking a winner."
    ),
    ("Mercury", A.TRINE): (
        "Articulating feelings comes easily. Emotion and reasoning cooperate, which suits "
        "conversations that need to be both clear and honest."
    ),
}

# Three readings per transiting Moon sign.
MOON_SIGN_VARIATIONS = {
    S.ARIES: [
        "Moon in Aries. Patience is thin and waiting feels physical. Put the restlessness into a decision you have been postponing.",
        "Moon in Aries. Instincts are sharp and courage is high. Trust first reactions, but run big choices past someone level-headed.",
        "Moon in Aries. Restless fire needs a physical outlet. Move, clean or train before it turns into irritability.",
    ],
    S.TAURUS: [
        "Moon in Taurus. Slow down and listen to your body. Rest, good food and unhurried time are the right work today.",
        "Moon in Taurus. Routine and predictability are emotional needs right now. Lean into what feels solid.",
        "Moon in Taurus. The senses ground you more than conversation. Seek calm company and pleasant surroundings.",
    ],
    S.GEMINI: [
        "Moon in Gemini. The mind is busy; let it out through writing or talking. Call the friend you have been meaning to call.",
        "Moon in Gemini. Curiosity is wide rather than deep. Follow the interesting threads instead of forcing focus.",
        "Moon in Gemini. Several short conversations satisfy more than one long one. Stay light and curious.",
    ],
    S.CANCER: [
        "Moon in Cancer. Sensitivity is up, so protect your energy and spend time with people who understand you.",
        "Moon in Cancer. Home and the people who really know you are the comfort. Drop the mask where it is safe.",
        "Moon in Cancer. Feelings run deep and need no justification. Honour them instead of explaining them away.",
    ],
    S.LEO: [
        "Moon in Leo. You want to be seen, and that is fine. Do not shrink your talents to make others comfortable.",
        "Moon in Leo. Creative expression feels urgent. Make space for it, even twenty minutes.",
        "Moon in Leo. Warmth draws people in. Enjoy the attention; your confidence gives others permission too.",
    ],
    S.VIRGO: [
        "Moon in Virgo. Tidying and fixing things calm the nerves. Small improvements outside create order inside.",
        "Moon in Virgo. You notice every flaw. Use that eye to improve something, not to criticise yourself.",
        "Moon in Virgo. Being useful is satisfying today. Keep some of that care for your own needs.",
    ],
    S.LIBRA: [
        "Moon in Libra. Beauty and balance are nourishment. Adjust your surroundings; they shape your mood more than usual.",
        "Moon in Libra. Connection matters more than the to-do list. Spend real time with people you care about.",
        "Moon in Libra. Peace matters, but not at the cost of an honest conversation. Real balance sometimes needs a ripple.",
    ],
    S.SCORPIO: [
        "Moon in Scorpio. Everything runs deeper and small talk feels hollow. Trust what you sense beneath the words.",
        "Moon in Scorpio. Complex feelings want room. Sit with the intensity; that is where change happens.",
        "Moon in Scorpio. Trust is on your mind. Notice who earns your openness through actions, not words.",
    ],
    S.SAGITTARIUS: [
        "Moon in Sagittarius. Routine feels confining. Find some freedom today, however small.",
        "Moon in Sagittarius. You see the bigger picture others miss. Share it; your optimism is useful.",
        "Moon in Sagittarius. Take a different route, try somewhere new, talk to a stranger. Variety feeds you.",
    ],
    S.CAPRICORN: [
        "Moon in Capricorn. Feelings turn practical. Progress on concrete tasks is its own comfort.",
        "Moon in Capricorn. Handle what is achievable first; the emotional knots can wait an afternoon.",
        "Moon in Capricorn. Responsibility feels heavy. Capable does not mean alone, so let someone help.",
    ],
    S.AQUARIUS: [
        "Moon in Aquarius. Step back from drama and observe. Distance is self-care, not coldness.",
        "Moon in Aquarius. Shared projects and ideas nourish more than one-on-one intensity today.",
        "Moon in Aquarius. Your view is unusual and that is the point. Do not flatten it to fit in.",
    ],
    S.PISCES: [
        "Moon in Pisces. Boundaries blur and other people's moods leak in. Guard your energy on purpose.",
        "Moon in Pisces. Intuition is loud. Treat the hunches as information even if you cannot prove them.",
        "Moon in Pisces. Reality feels harsh; music, art or daydreaming recharge you. Let yourself drift a little.",
    ],
}

# (transit body, aspect to natal Sun) -> (description, dominant energy, intensity)
DAILY_ENERGY = {
    ("Saturn", A.CONJUNCTION): ("serious restructuring and responsibility", "disciplined but pressured energy requiring patience", 3),
    ("Saturn", A.SQUARE): ("obstacles and important lessons", "challenging energy that builds character through perseverance", 4),
    ("Saturn", A.OPPOSITION): ("external pressure and authority challenges", "tense energy requiring maturity and careful decisions", 3),
    ("Saturn", A.TRINE): ("earned achievements and stable progress", "productive and structured energy", 1),
    ("Pluto", A.CONJUNCTION): ("deep transformation and power dynamics", "intense transformational energy demanding psychological growth", 5),
    ("Pluto", A.SQUARE): ("deep transformation and power dynamics", "intense transformational energy demanding psychological growth", 5),
    ("Pluto", A.OPPOSITION): ("power struggles and external pressure to change", "confrontational energy requiring inner strength", 4),
    ("Pluto", A.TRINE): ("empowerment and positive regeneration", "powerfully transformative yet flowing energy", 2),
    ("Uranus", A.CONJUNCTION): ("sudden changes and breakthrough moments", "unpredictable energy requiring flexibility and openness to change", 4),
    ("Uranus", A.SQUARE): ("sudden changes and breakthrough moments", "unpredictable energy requiring flexibility and openness to change", 4),
    ("Uranus", A.OPPOSITION): ("external disruptions and freedom conflicts", "restless energy seeking liberation from restrictions", 3),
    ("Uranus", A.TRINE): ("inventive breakthroughs and exciting progress", "inventive and progressive energy", 1),
    ("Jupiter", A.CONJUNCTION): ("major expansion and new opportunities", "optimistic and expansive energy with abundant possibilities", 0),
    ("Jupiter", A.TRINE): ("natural growth and flowing abundance", "lucky and expansive energy supporting success", 0),
    ("Jupiter", A.SEXTILE): ("growth opportunities through effort", "optimistic energy with opportunities for development", 0),
    ("Jupiter", A.SQUARE): ("overconfidence and excess", "overexpansive energy requiring moderation", 0),
    ("Mars", A.SQUARE): ("impatience and potential conflicts", "restless and impatient energy requiring careful action", 2),
    ("Mars", A.OPPOSITION): ("confrontational dynamics and competition", "competitive energy requiring diplomatic handling", 2),
    ("Mars", A.TRINE): ("productive action and clear direction", "energetic and productive energy for taking action", 0),
}
DAILY_ENERGY_ORDER = ["Saturn", "Pluto", "Uranus", "Jupiter", "Mars"]

# Transiting Moon to natal Sun when nothing slower is active.
LUNAR_PHASE_ENERGY = {
    A.CONJUNCTION: "introspective and renewal-focused energy",
    A.OPPOSITION: "emotionally heightened and culminating energy",
    A.SQUARE: "emotionally complex energy requiring balance",
}
BALANCED_ENERGY = "balanced and steady energy"

# (transit body, aspect to natal Sun) -> (theme, weekly focus, intensity)
WEEKLY_ENERGY = {
    ("Venus", A.CONJUNCTION): ("harmonious relationships and creative expression", "loving and creative energy with warmer social connections", 2),
    ("Venus", A.SQUARE): ("relationship tensions and value conflicts", "complex relationship dynamics requiring diplomatic balance", 3),
    ("Venus", A.OPPOSITION): ("relationship polarities and partnership decisions", "relationship-focused energy requiring compromise and understanding", 2),
    ("Venus", A.TRINE): ("flowing social energy and creative abundance", "harmonious creative and social energy supporting connections", 1),
    ("Mercury", A.CONJUNCTION): ("clear communication and mental clarity", "mentally stimulating energy suited to planning and communication", 1),
    ("Mercury", A.SQUARE): ("communication challenges and decision pressure", "mentally complex energy requiring careful communication", 2),
    ("Mercury", A.OPPOSITION): ("differing perspectives and negotiation", "mentally active energy balancing different viewpoints", 1),
    ("Mercury", A.TRINE): ("smooth communication and easy learning", "mentally harmonious energy supporting clear thinking", 0),
    ("Mars", A.CONJUNCTION): ("high energy and bold initiatives", "dynamic action-oriented energy for starting new projects", 2),
    ("Mars", A.SQUARE): ("impatience and potential conflicts", "restless energy requiring patience and strategy", 3),
    ("Mars", A.OPPOSITION): ("external challenges and competition", "competitive energy requiring careful handling of conflict", 2),
    ("Mars", A.TRINE): ("productive action and successful initiatives", "energetic and successful energy supporting bold moves", 1),
}
WEEKLY_ENERGY_ORDER = ["Venus", "Mercury", "Mars"]
VENUS_MOON_THEME = "emotional fulfillment in relationships"
WEEKLY_STEADY_SUFFIX = " with steady weekly progression"

WEEKLY_ENERGY_TEMPLATES = [
    "The week carries {pattern}.",
    "Expect {pattern} as the days unfold.",
    "Underneath it all runs {pattern}.",
    "Plan around {pattern}.",
]

# (transit body, aspect to natal Sun) -> monthly theme
MONTHLY_THEMES = {
    ("Saturn", A.CONJUNCTION): "restructuring your foundations and learning important lessons",
    ("Saturn", A.SQUARE): "restructuring your foundations and learning important lessons",
    ("Saturn", A.OPPOSITION): "handling external pressure and questions of authority",
    ("Saturn", A.TRINE): "building solid foundations and earning recognition",
    ("Jupiter", A.CONJUNCTION): "major expansion and seizing new opportunities",
    ("Jupiter", A.TRINE): "natural growth and widening horizons",
    ("Jupiter", A.SEXTILE): "learning new skills and developing your potential",
    ("Jupiter", A.SQUARE): "moderating excess and avoiding overcommitment",
    ("Uranus", A.CONJUNCTION): "embracing radical change and breaking old limits",
    ("Uranus", A.SQUARE): "embracing radical change and breaking old limits",
    ("Uranus", A.TRINE): "inventive breakthroughs and progressive personal development",
    ("Pluto", A.CONJUNCTION): "deep personal transformation and releasing old patterns",
    ("Pluto", A.SQUARE): "deep personal transformation and releasing old patterns",
    ("Pluto", A.TRINE): "empowerment and a renewed sense of direction",
}
MONTHLY_ORDER = ["Saturn", "Jupiter", "Uranus", "Pluto"]
# Transiting Venus to natal Venus.
MONTHLY_VENUS_THEMES = {
    A.CONJUNCTION: "relationship development and financial planning",
    A.TRINE: "harmonious relationships and creative self-expression",
}
MONTHLY_DEFAULT = "inner reflection and steady personal development"

YEARLY_THEMES = {
    ("Jupiter", A.CONJUNCTION): "stepping into a major expansion cycle and embracing new opportunities",
    ("Jupiter", A.TRINE): "widening your worldview and growing through opportunities that arrive easily",
    ("Jupiter", A.SEXTILE): "developing your potential and learning new perspectives through focused effort",
    ("Saturn", A.CONJUNCTION): "completing a major life chapter and laying foundations for the next one",
    ("Saturn", A.SQUARE): "learning essential lessons and building real authority through challenge",
    ("Saturn", A.TRINE): "building lasting foundations and earning recognition for your efforts",
    ("Uranus", A.CONJUNCTION): "embracing personal revolution and breaking free of limiting patterns",
    ("Uranus", A.SQUARE): "embracing personal revolution and breaking free of limiting patterns",
    ("Uranus", A.TRINE): "finding your own voice through progressive change",
    ("Neptune", A.CONJUNCTION): "developing intuition and moving through spiritual change with discernment",
    ("Neptune", A.SQUARE): "developing intuition and moving through spiritual change with discernment",
    ("Neptune", A.TRINE): "deepening spiritual understanding and creative inspiration",
    ("Pluto", A.CONJUNCTION): "healing old patterns and embracing profound transformation",
    ("Pluto", A.SQUARE): "healing old patterns and embracing profound transformation",
    ("Pluto", A.TRINE): "stepping into personal power through positive regeneration",
}
YEARLY_ORDER = ["Jupiter", "Saturn", "Uranus", "Neptune", "Pluto"]
YEARLY_DEFAULT = "deepening relationships and developing emotional intelligence through steady growth"

MONTHLY_TEMPLATE = (
    "This month focuses on {theme}. Your {traits} will carry you through it, "
    "and your {approach} keeps the progress meaningful."
)
YEARLY_TEMPLATE = (
    "This year is about {theme}. Your {traits} anchor a {approach} "
    "through a significant period of growth."
)

WEEKLY_TEMPLATE = (
    "This week, the Moon's journey through {moon_sign} highlights your {moon_focus}. "
    "As a {sun_sign}, you're called to {weekly_call}."
)
WEEKLY_NO_MOON_TEMPLATE = (
    "This week invites you to embody your {sun_sign} essence more fully. "
    "The sky supports your path toward authentic self-expression."
)

CATEGORY_CLOSINGS = {
    "love": [
        "Trust what feels genuine.",
        "Honour this truth in every connection.",
        "Let the right people meet the real you.",
    ],
    "career": [
        "Channel this into work that honours how you actually operate.",
        "Put that drive behind one clear priority.",
        "Progress follows when effort matches purpose.",
    ],
    "money": [
        "Abundance follows when spending matches your values.",
        "Let your own priorities set the budget, not other people's expectations.",
        "Small consistent choices compound.",
    ],
    "future": [
        "The future unfolds through your willingness to grow.",
        "Choices made now set the direction.",
        "Keep the door open to what you have not tried yet.",
    ],
    "general": [
        "Trust your inner knowing.",
        "Honour both your need for expression and your need for rest.",
        "Notice what your feelings are pointing at.",
    ],
}

# Title and description pools per cycle influence.
CYCLE_POOLS = {
    CycleInfluence.POSITIVE: [
        ("Embrace Emotional Journeys", "Supportive currents make it easier to open up and let feelings guide the next step."),
        ("Ride the Momentum", "Effort meets little resistance. Use the flow to move something forward."),
        ("Welcome New Connections", "People and ideas arrive with good timing. Say yes to what feels right."),
        ("Trust the Flow", "Things line up without force. Keep showing up and let it unfold."),
    ],
    CycleInfluence.CHALLENGING: [
        ("Test Your Foundations", "Pressure shows where structure is weak. Strengthen it rather than patching it."),
        ("Work Through Friction", "Tension asks for a decision you have been avoiding. Make it deliberately."),
        ("Hold Your Boundaries", "Demands pile up. Decide what is yours to carry and set the rest down."),
        ("Patience Under Pressure", "Results come slower than you want. Steady effort wins this stretch."),
    ],
    CycleInfluence.TRANSFORMATIVE: [
        ("Shift Your Perspective", "Old views loosen. Let a new angle on a familiar situation take shape."),
        ("Shed an Old Skin", "Something that defined you is ending. Make room for what replaces it."),
        ("Deep Renewal", "Change works below the surface. Trust the process even when it is quiet."),
    ],
    CycleInfluence.NEUTRAL: [
        ("Gather Your Focus", "Energy concentrates in one area of life. Direct it with intention."),
        ("Begin a New Chapter", "A fresh start is available. Set the tone early."),
        ("Blend Two Forces", "Two parts of you merge. Notice what the combination makes possible."),
    ],
}

# (text, icon) pairs for the daily affirmation strip.
AFFIRMATIONS = [
    ("Your intuition is louder than your anxiety today", "brain.head.profile"),
    ("Stop explaining yourself to people who won't listen", "bubble.left.and.bubble.right"),
    ("The thing you're avoiding is the thing that frees you", "key"),
    ("Boundaries are a kindness to your future self", "heart"),
    ("What feels like falling apart is falling together", "sparkles"),
    ("Sensitivity is a strength, not a weakness", "wand.and.stars"),
    ("The person you're becoming is worth the discomfort", "figure.walk"),
    ("Trust the process even without seeing the outcome", "eye"),
    ("Your quirks are your authenticity showing", "star"),
    ("Resistance is often fear dressed up as logic", "flame"),
    ("Your gut knows what your brain hasn't worked out yet", "brain"),
    ("Dreams carry weight when you're changing", "moon.zzz"),
    ("Clarity arrives through confusion, not around it", "lightbulb"),
    ("Your body remembers what your mind forgets", "figure.mind.and.body"),
    ("Sometimes the answer is to stop asking the question", "questionmark.diamond"),
]
