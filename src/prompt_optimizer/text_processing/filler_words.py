"""Closed vocabulary of discourse-filler and hedging words.

Membership is tested per word, case-insensitively, against lowercase entries.
The list is intentionally broad; it is applied as-is rather than curated per
prompt.
"""

FILLER_WORDS: frozenset[str] = frozenset(
    {
        "abandoning", "about", "abruptly", "absolutely", "accelerations", "accentuating",
        "accepting", "accidents", "accommodations", "accomplishing", "accumulating", "achieving",
        "acknowledging", "acquiring", "actions", "activities", "actually", "adaptations",
        "addressing", "adjacent", "adjustments", "admiring", "admitting", "adoring", "advances",
        "advancing", "advising", "advocating", "affiliations", "ages", "agreeing", "aiding",
        "aiming", "allegedly", "alliances", "alluding", "almost", "alterations", "amassing",
        "amazingly", "amounts", "analyzing", "announcing", "anxieties", "apparently",
        "appreciating", "approaches", "approaching", "approving", "approximately", "architectures",
        "areas", "arguably", "arguing", "arguments", "around", "arrangements", "arranging",
        "arriving", "ascending", "assemblies", "assembling", "asserting", "assessing", "assisting",
        "associations", "attachments", "attempting", "attempts", "authenticating", "avoiding",
        "backgrounds", "backing", "backs", "bagging", "barely", "basically", "battles", "battling",
        "beats", "beginning", "behaviors", "bettering", "blocking", "blocs", "blueprints",
        "boards", "bonds", "boosting", "borders", "bottoms", "boundaries", "boxing", "breaking",
        "briefly", "bringing", "building", "buildings", "burdens", "businesses", "calendars",
        "camouflaging", "capacities", "carving", "cases", "catalogs", "causing", "ceasing",
        "centering", "centers", "certainly", "certifying", "chains", "challenging", "chambers",
        "changes", "charts", "chasing", "chatting", "checking", "cherishing", "choosing",
        "chopping", "circumstances", "claiming", "classes", "clearly", "climbing", "clipping",
        "closing", "clusters", "clutching", "coalitions", "collaborations", "collecting",
        "collections", "coming", "commencing", "commenting", "commitments", "committees",
        "commonly", "communicating", "communities", "companies", "comparatively", "compelling",
        "compensating", "competing", "completely", "completing", "complimenting", "components",
        "comprehending", "compressing", "comprising", "concealing", "conceding", "conceivably",
        "concentrating", "concerning", "concerns", "concluding", "conditionally", "conditions",
        "conducting", "conducts", "confederations", "conferences", "confessing", "confirming",
        "conflicts", "confronting", "congratulating", "congresses", "connections", "consenting",
        "conserving", "considerably", "considering", "consistently", "consisting", "constantly",
        "constructing", "constructions", "containing", "contemplating", "contending", "contesting",
        "contexts", "continually", "continuing", "continuously", "contracting", "contributing",
        "controlling", "conventions", "conversations", "conversing", "conveying", "cooperations",
        "corporations", "councils", "counseling", "courses", "covering", "cracking", "creating",
        "crises", "cropping", "crying", "curricula", "cutting", "damaging", "data", "databases",
        "dates", "days", "debatably", "debates", "decades", "deciding", "declaring", "declining",
        "decreasing", "deducing", "defending", "definitely", "delivering", "demolishing",
        "demonstrating", "departing", "depths", "descending", "describing", "designing", "designs",
        "destroying", "detailing", "details", "detecting", "determining", "developing",
        "developments", "diagrams", "differentiating", "dimensions", "diminishing", "directing",
        "directories", "discovering", "discussing", "discussions", "disguising", "displaying",
        "disputes", "distances", "distinguishing", "districts", "dividing", "documents",
        "donating", "doubtfully", "dragging", "dramatically", "dropping", "durations", "duties",
        "earning", "edges", "educating", "effectively", "efforts", "elements", "embracing",
        "emergencies", "emphasizing", "enclosing", "encompassing", "encountering", "encouraging",
        "endeavoring", "endeavors", "ending", "endorsing", "enduring", "energies", "engagements",
        "enhancements", "enhancing", "enjoying", "enormously", "ensuring", "entering",
        "enterprises", "entirely", "environments", "epochs", "eras", "escaping", "especially",
        "essentially", "establishing", "establishments", "evading", "evaluating", "events",
        "evidently", "exactly", "examining", "examples", "exceptionally", "executing",
        "exhibiting", "expanding", "expansions", "experiencing", "explaining", "exposing",
        "expressing", "extending", "extensions", "extents", "exteriors", "extraordinarily",
        "extremely", "facilities", "facing", "facts", "failing", "fairly", "falling", "favoring",
        "fears", "federations", "feeling", "fighting", "fights", "figures", "files", "finding",
        "finishing", "fleeing", "focusing", "folders", "following", "forces", "forcing", "forming",
        "fortunately", "forums", "founding", "fractions", "frequently", "fronts", "frowning",
        "fully", "functioning", "fundamentally", "futures", "gaining", "gathering", "gatherings",
        "gazing", "generally", "generating", "generations", "getting", "giving", "glaring",
        "going", "gossiping", "gradually", "graphs", "grasping", "greeting", "grinning",
        "gripping", "groups", "growing", "growths", "guaranteeing", "guarding", "guiding",
        "handing", "handling", "happenings", "hardly", "harming", "harvesting", "hearing",
        "heights", "helping", "hiding", "highlighting", "histories", "holding", "honoring",
        "hopefully", "hours", "houses", "hugely", "hugging", "hunting", "hurting",
        "hypothetically", "identifying", "immediately", "immensely", "implementing", "importantly",
        "improvements", "improving", "incidents", "including", "increasing", "incredibly",
        "inferring", "information", "informing", "initiating", "injuring", "inserting", "insides",
        "insisting", "inspecting", "instances", "instantly", "instants", "institutions",
        "instructing", "intensities", "interestingly", "interiors", "intervals", "introducing",
        "inventories", "investing", "involvements", "involving", "issues", "jobs", "journeying",
        "judging", "keeping", "knowing", "laboring", "labors", "largely", "laughing", "launching",
        "laying", "leading", "leagues", "leaving", "lectures", "lefts", "lengths", "lessons",
        "lifting", "likely", "liking", "limits", "links", "listening", "lists", "literally",
        "loads", "locating", "locations", "looking", "losing", "loving", "lowering", "lying",
        "magnitudes", "mainly", "maintaining", "making", "managing", "manners", "masking",
        "masses", "massively", "matters", "maybe", "measurements", "meditating", "meeting",
        "meetings", "melodies", "memberships", "mentioning", "methods", "middles", "minutes",
        "models", "modifications", "molding", "momentarily", "moments", "monitoring", "months",
        "mostly", "motions", "movements", "moving", "music", "near", "nearby", "nearing", "nearly",
        "neighborhoods", "neighboring", "networks", "noises", "normally", "notably", "noticing",
        "noting", "numbers", "obligations", "obscuring", "observing", "obtaining", "obviously",
        "occasionally", "occasions", "occurrences", "offering", "often", "opening", "operating",
        "opposing", "opting", "orders", "organizations", "organizing", "orienting", "outlining",
        "outsides", "overseeing", "paces", "packaging", "panels", "papers", "parliaments",
        "participations", "particularly", "particulars", "partnerships", "parts", "passing",
        "pasts", "patterns", "paying", "penetrating", "perceiving", "percentages", "perfectly",
        "performing", "perhaps", "periods", "pertaining", "picking", "pieces", "piercing",
        "places", "placing", "planning", "plans", "pondering", "portions", "positioning",
        "positions", "possibly", "potentially", "powers", "practically", "praising", "precisely",
        "preferring", "preparing", "presentations", "presenting", "presents", "preserving",
        "pressing", "pressures", "presumably", "pretty", "preventing", "primarily", "probably",
        "problems", "proceeding", "proclaiming", "producing", "programs", "progressing",
        "progressions", "promoting", "proportions", "proposing", "protecting", "providing",
        "proving", "provisionally", "pruning", "pulling", "pursuing", "pushing", "putting",
        "quantities", "questionably", "quickly", "quite", "quitting", "raising", "ranges",
        "rapidly", "rarely", "rates", "rather", "ratios", "reaches", "reaching", "realizing",
        "reasoning", "receiving", "recognizing", "recommending", "records", "reducing",
        "referring", "reflecting", "regarding", "regions", "regularly", "relating",
        "relationships", "relatively", "remaining", "remarkably", "remarking", "repeatedly",
        "reportedly", "resisting", "respecting", "responsibilities", "resting", "resulting",
        "retaining", "revealing", "revering", "reviewing", "revisions", "rewarding", "rhythms",
        "rights", "rising", "rooms", "roughly", "ruining", "running", "safeguarding", "saying",
        "scarcely", "schedules", "schemes", "scopes", "scowling", "screaming", "sculpting",
        "searching", "seconds", "sections", "securing", "seeing", "seeking", "seemingly",
        "segments", "seldom", "selecting", "senates", "sending", "sensing", "separating",
        "sequences", "series", "serving", "setting", "settings", "shaping", "shielding", "shortly",
        "shouting", "shoving", "showing", "shrinking", "sides", "significantly", "sites",
        "sitting", "situating", "situations", "sizes", "sleeping", "slicing", "slightly", "slowly",
        "smashing", "smiling", "snipping", "societies", "sometimes", "somewhat", "songs", "sounds",
        "spaces", "spans", "speaking", "specifically", "specifics", "speeches", "speeds",
        "spending", "splitting", "spots", "spotting", "squeezing", "stabbing", "standing",
        "staring", "starting", "states", "stating", "statistics", "statuses", "staying",
        "steadily", "stockpiling", "stopping", "storing", "strains", "strategies", "strengths",
        "stresses", "stressing", "stretches", "stretching", "striving", "structures",
        "structuring", "struggles", "struggling", "substantially", "succeeding", "suddenly",
        "suffering", "suggesting", "summarizing", "summits", "supervising", "supplying",
        "supporting", "supposedly", "surely", "surfaces", "surprisingly", "surrounding",
        "surroundings", "swiftly", "syllabi", "systems", "tables", "tackling", "taking", "talking",
        "talks", "targeting", "tasks", "teaching", "teams", "techniques", "telling", "temporarily",
        "tempos", "tensions", "tentatively", "terminating", "testing", "thanking", "theoretically",
        "thicknesses", "thinking", "ties", "times", "timetables", "toiling", "tolerating", "tops",
        "totally", "touching", "tracking", "transmitting", "traveling", "treasuring",
        "tremendously", "tries", "trimming", "trying", "tunes", "typically", "uncertainly",
        "uncovering", "undergoing", "underscoring", "understanding", "undoubtedly",
        "unfortunately", "unions", "updates", "upgrades", "upgrading", "urging", "usually",
        "validating", "valuing", "vastly", "velocities", "venues", "verifying", "viewing",
        "virtually", "volumes", "waking", "walking", "wars", "watching", "ways", "weeks",
        "weights", "welcoming", "whispering", "widths", "winning", "working", "works", "worries",
        "worshipping", "wounding", "wrapping", "years", "yelling", "zones",
    }
)

# Two-word entries, matched as consecutive tokens separated by a single space.
# A phrase whose first word is already in FILLER_WORDS never matches, so only
# phrases starting with a non-filler word are listed.
FILLER_PHRASES: frozenset[tuple[str, str]] = frozenset(
    {
        ("adding", "to"),
        ("carrying", "out"),
        ("close", "to"),
        ("dealing", "with"),
    }
)


def is_filler_word(word: str) -> bool:
    """Return True if ``word`` is in the filler vocabulary (case-insensitive)."""
    return word.lower() in FILLER_WORDS


def is_filler_phrase(first: str, second: str) -> bool:
    """Return True if the two words form a filler phrase (case-insensitive)."""
    return (first.lower(), second.lower()) in FILLER_PHRASES
