"""
Word Lists

Fixed lexicons used by the heuristic analyzers. All entries are lowercase
with straight apostrophes.
"""

STOPWORDS = frozenset([
    "the", "a", "an", "and", "or", "but", "nor", "so", "yet", "in", "on", "at",
    "to", "for", "of", "with", "by", "from", "into", "onto", "upon", "about",
    "over", "under", "after", "before", "between", "through", "during", "without",
    "is", "are", "was", "were", "be", "been", "being", "am",
    "have", "has", "had", "having", "do", "does", "did", "doing", "done",
    "will", "would", "could", "should", "may", "might", "must", "shall", "can",
    "i", "me", "my", "mine", "myself", "we", "us", "our", "ours", "ourselves",
    "you", "your", "yours", "yourself", "yourselves",
    "he", "him", "his", "himself", "she", "her", "hers", "herself",
    "it", "its", "itself", "they", "them", "their", "theirs", "themselves",
    "this", "that", "these", "those", "there", "here", "what", "which", "who",
    "whom", "whose", "when", "where", "why", "how", "if", "then", "than", "as",
    "not", "no", "yes", "all", "any", "both", "each", "few", "more", "most",
    "other", "some", "such", "only", "own", "same", "too", "very", "just",
    "also", "even", "again", "once", "up", "down", "out", "off", "now",
    "because", "while", "although", "though", "until", "unless", "since",
    "whether", "one", "get", "got", "really", "much", "many", "well", "still",
])

# Contractions (informal marker); curly apostrophes are normalized upstream
CONTRACTIONS = frozenset([
    "don't", "can't", "won't", "isn't", "aren't", "wasn't", "weren't", "hasn't",
    "haven't", "hadn't", "doesn't", "didn't", "couldn't", "shouldn't", "wouldn't",
    "mustn't", "needn't", "shan't", "ain't",
    "i'm", "i'll", "i've", "i'd", "you're", "you'll", "you've", "you'd",
    "he's", "he'll", "he'd", "she's", "she'll", "she'd", "it's", "it'll", "it'd",
    "we're", "we'll", "we've", "we'd", "they're", "they'll", "they've", "they'd",
    "that's", "that'll", "there's", "here's", "what's", "who's", "where's",
    "how's", "let's", "y'all", "could've", "would've", "should've", "might've",
])

# Casual words that count against formality alongside contractions
INFORMAL_WORDS = frozenset([
    "gonna", "wanna", "gotta", "kinda", "sorta", "lemme", "gimme", "dunno",
    "yeah", "yep", "yup", "nope", "nah", "ok", "okay", "hey", "wow", "cool",
    "awesome", "stuff", "guys", "super", "pretty", "totally", "lol", "omg",
    "ugh", "whoa", "huh", "btw",
])

SECOND_PERSON = frozenset(["you", "your", "yours", "yourself", "yourselves", "ya", "y'all"])

FIRST_PERSON = frozenset([
    "i", "me", "my", "mine", "myself", "we", "us", "our", "ours", "ourselves",
])

FORMAL_CONNECTIVES = frozenset([
    "furthermore", "therefore", "moreover", "consequently", "accordingly",
    "nevertheless", "nonetheless", "thus", "hence", "whereas", "wherein",
    "subsequently", "additionally", "notwithstanding", "henceforth", "thereby",
])

TRANSITION_WORDS = frozenset([
    "however", "therefore", "moreover", "furthermore", "nevertheless",
    "consequently", "additionally", "meanwhile", "subsequently", "instead",
    "similarly", "likewise", "finally", "first", "second", "third",
])

# Single-word hedges
HEDGE_WORDS = frozenset([
    "perhaps", "maybe", "somewhat", "possibly", "probably", "apparently",
    "arguably", "seemingly", "presumably", "likely", "unlikely", "generally",
    "usually", "often", "sometimes", "relatively", "fairly", "rather",
    "quite", "slightly", "suggests", "suggest", "seems", "seem", "appears",
    "might", "could",
])

# Multi-word hedges, matched as phrases
HEDGE_PHRASES = (
    "sort of", "kind of", "i think", "i guess", "i suppose", "i believe",
    "it seems", "to some extent", "more or less", "in a sense",
)

IDIOMS = (
    "piece of cake", "break a leg", "hit the nail on the head", "hit the nail",
    "costs an arm and a leg", "once in a blue moon", "under the weather",
    "the ball is in your court", "bite the bullet", "beat around the bush",
    "on the same page", "back to square one", "call it a day",
    "cut corners", "get the ball rolling", "in hot water", "let the cat out of the bag",
    "miss the boat", "no pain no gain", "on thin ice", "the last straw",
    "throw in the towel", "when pigs fly", "a blessing in disguise",
    "better late than never", "best of both worlds", "spill the beans",
    "break the ice", "at the end of the day", "up in the air",
)

# Subordinate-clause markers counted by the syntactic analyzer
SUBORDINATORS = frozenset([
    "which", "that", "because", "although", "though", "whereas", "while",
    "since", "unless", "whom", "whose", "whenever", "wherever", "if",
])

# Tone buckets
ANALYTICAL_WORDS = frozenset([
    "analysis", "analyze", "data", "evidence", "result", "results", "therefore",
    "hypothesis", "method", "methods", "measure", "significant", "consequently",
    "factor", "factors", "indicates", "suggests", "demonstrates", "research",
    "study", "theory", "model", "framework", "variable", "correlation",
    "conclusion", "furthermore", "moreover", "thus", "hence", "examine",
    "evaluate", "assess", "findings", "approach", "process", "system",
])

WARM_WORDS = frozenset([
    "love", "loved", "lovely", "grateful", "thankful", "thanks", "thank",
    "happy", "joy", "glad", "warm", "kind", "kindness", "friend", "friends",
    "family", "together", "care", "caring", "hope", "heart", "wonderful",
    "beautiful", "appreciate", "cherish", "gentle", "comfort", "smile",
    "delighted", "sweet", "hug",
])

ASSERTIVE_WORDS = frozenset([
    "must", "need", "needs", "will", "clearly", "certainly", "definitely",
    "absolutely", "always", "never", "demand", "require", "required", "insist",
    "undoubtedly", "essential", "critical", "immediately", "now", "decide",
    "decisive", "commit", "ensure", "expect", "firmly",
])

PLAYFUL_WORDS = frozenset([
    "fun", "funny", "haha", "lol", "silly", "joke", "joking", "laugh",
    "laughed", "giggle", "hilarious", "goofy", "wacky", "yay", "whee",
    "oops", "awesome", "crazy", "wild", "banana", "bananas", "party", "dance",
    "play", "playful", "games",
])

# Determiners and possessives that usually precede a noun phrase
DETERMINERS = frozenset([
    "the", "a", "an", "this", "that", "these", "those", "my", "your", "our",
    "their", "his", "her", "its", "every", "each", "some", "any", "no",
])

# Suffixes that mark abstract or derived nouns
NOUN_SUFFIXES = (
    "tion", "sion", "ment", "ness", "ity", "ism", "ance", "ence", "ship",
    "hood", "ist", "ogy", "ure", "dom",
)

# Verb/adjective lookalikes excluded from noun detection
NON_NOUN_SUFFIXES = ("ly", "ing", "ed", "ous", "ful", "ive", "able", "ible", "est")

PASSIVE_AUXILIARIES = frozenset(["is", "are", "was", "were", "be", "been", "being", "am"])

IRREGULAR_PARTICIPLES = frozenset([
    "done", "made", "given", "taken", "seen", "known", "shown", "written",
    "built", "found", "held", "kept", "left", "lost", "paid", "sent", "sold",
    "told", "thought", "brought", "bought", "caught", "taught", "won", "chosen",
    "driven", "eaten", "forgotten", "hidden", "spoken", "stolen", "broken",
])
