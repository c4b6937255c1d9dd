# An 8K extraction of common short English words from Alan Beale's public
# domain "2 of 12" dictionary. 8192 words, lower case, sorted, so each word
# carries 13 bits of a key.

words = (
    "a", "aback", "abacus", "abandon", "abate", "abbey", "abbot", "abdomen",
    "abduct", "abet", "abhor", "abide", "ability", "abject", "ablaze", "able",
    "ably", "aboard", "abode", "abolish", "abort", "abound", "about", "above",
    "abreast", "abridge", "abroad", "abrupt", "abscess", "abscond", "absence", "absent",
    "absolve", "absorb", "abstain", "absurd", "abuse", "abysmal", "abyss", "accede",
    "accent", "accept", "access", "acclaim", "accord", "accost", "account", "accrue",
    "accuse", "ace", "ache", "achieve", "acid", "acidity", "acne", "acorn",
    "acquit", "acre", "acrid", "acrobat", "across", "acrylic", "act", "acting",
    "action", "active", "actor", "actress", "actual", "acumen", "acute", "acutely",
    "ad", "adage", "adamant", "adapt", "add", "addict", "address", "adept",
    "adhere", "adjoin", "adjourn", "adjunct", "adjust", "admiral", "admire", "admirer",
    "admit", "ado", "adobe", "adopt", "adore", "adorn", "adrift", "adroit",
    "adult", "advance", "adverb", "adverse", "advice", "advise", "aerial", "aerosol",
    "afar", "affable", "affably", "affair", "affect", "affirm", "affix", "afflict",
    "afford", "affront", "afield", "aflame", "afloat", "afoot", "afraid", "afresh",
    "after", "again", "against", "age", "aged", "agency", "agenda", "agent",
    "aghast", "agile", "agility", "agitate", "aglow", "ago", "agony", "agree",
    "aground", "ah", "ahead", "ahoy", "aid", "aide", "ail", "ailment",
    "aim", "aimless", "air", "airmail", "airport", "airy", "aisle", "ajar",
    "akin", "alarm", "alas", "albeit", "albino", "album", "alcohol", "alcove",
    "ale", "alert", "algae", "alias", "alibi", "alien", "alight", "align",
    "alike", "alimony", "alive", "alkali", "all", "allay", "allege", "allergy",
    "alley", "allied", "allot", "allow", "alloy", "allude", "allure", "ally",
    "almanac", "almond", "almost", "alms", "aloft", "alone", "along", "aloof",
    "aloud", "already", "also", "altar", "alter", "alto", "always", "am",
    "amass", "amateur", "amaze", "amber", "amble", "ambush", "amen", "amend",
    "amends", "amenity", "amiable", "amiably", "amid", "amiss", "ammonia", "amnesia",
    "amnesty", "among", "amorous", "amount", "ample", "amplify", "amply", "amulet",
    "amuse", "an", "anal", "analyst", "analyze", "anarchy", "anatomy", "anchor",
    "anchovy", "ancient", "and", "anemia", "anemic", "anew", "angel", "angelic",
    "anger", "angle", "angler", "angrily", "angry", "anguish", "angular", "animal",
    "animate", "ankle", "annals", "annex", "annoy", "annual", "annuity", "annul",
    "anoint", "another", "answer", "ant", "anthem", "anthill", "antique", "antler",
    "antonym", "anus", "anvil", "anxiety", "anxious", "any", "anybody", "anyhow",
    "anyone", "anyway", "aorta", "apart", "apathy", "ape", "apex", "apiece",
    "aplomb", "apology", "apostle", "appall", "apparel", "appeal", "appear", "appease",
    "append", "applaud", "apple", "applied", "apply", "approve", "apricot", "apron",
    "apt", "aquatic", "arable", "arbiter", "arbor", "arc", "arcade", "arch",
    "archaic", "archer", "archery", "archway", "ardent", "ardor", "are", "area",
    "arena", "argue", "aria", "arid", "arise", "arisen", "ark", "arm",
    "armor", "armored", "armory", "armpit", "army", "aroma", "arose", "around",
    "arouse", "arraign", "arrange", "array", "arrears", "arrest", "arrival", "arrive",
    "arrow", "arsenal", "arsenic", "arson", "art", "artery", "artful", "article",
    "artist", "as", "ascend", "ascent", "ascetic", "ascribe", "asexual", "ash",
    "ashamed", "ashen", "ashore", "aside", "ask", "askance", "askew", "asleep",
    "aspect", "aspen", "asphalt", "aspire", "aspirin", "ass", "assail", "assault",
    "assent", "assert", "assess", "asset", "assign", "assist", "assume", "assure",
    "assured", "asthma", "astound", "astray", "astride", "astute", "asylum", "at",
    "ate", "atheism", "atheist", "athlete", "atlas", "atom", "atomic", "atone",
    "attach", "attache", "attack", "attain", "attempt", "attend", "attest", "attic",
    "attire", "attune", "auburn", "auction", "audible", "audibly", "audio", "audit",
    "auditor", "augment", "august", "aunt", "aura", "aural", "austere", "author",
    "auto", "autopsy", "autumn", "avail", "avarice", "avenge", "avenue", "average",
    "averse", "avert", "aviator", "avid", "avocado", "avoid", "avow", "avowal",
    "await", "awake", "awaken", "award", "aware", "away", "awe", "awesome",
    "awful", "awfully", "awhile", "awkward", "awning", "awoke", "awry", "axes",
    "axiom", "axis", "axle", "aye", "azalea", "azure", "babble", "babe",
    "baboon", "baby", "babyish", "back", "backer", "backing", "backlog", "bacon",
    "bad", "badge", "badger", "badly", "baffle", "bag", "bagel", "baggage",
    "baggy", "bail", "bait", "bake", "baker", "bakery", "balance", "bald",
    "bale", "balk", "ball", "ballad", "ballast", "ballet", "ballot", "balm",
    "balmy", "baloney", "bamboo", "ban", "banal", "banana", "band", "bandage",
    "bandit", "bandy", "bang", "banish", "banjo", "bank", "banker", "banking",
    "banner", "banquet", "banter", "baptism", "baptize", "bar", "barb", "barber",
    "bard", "bare", "barely", "bargain", "barge", "bark", "barley", "barn",
    "baron", "barrage", "barrel", "barren", "barrier", "barring", "barter", "base",
    "bases", "bash", "bashful", "basic", "basil", "basin", "basis", "bask",
    "basket", "bass", "bassoon", "bastard", "baste", "bat", "batch", "bath",
    "bathe", "bathtub", "baton", "batter", "battery", "battle", "bawdy", "bawl",
    "bay", "bayonet", "bayou", "bazaar", "be", "beach", "beacon", "bead",
    "beady", "beagle", "beak", "beaker", "beam", "bean", "bear", "beard",
    "bearer", "bearing", "beast", "beat", "beaten", "beater", "beauty", "beaver",
    "became", "because", "beckon", "become", "bed", "bedbug", "bedding", "bedlam",
    "bedrock", "bedside", "bedtime", "bee", "beech", "beef", "beefy", "been",
    "beer", "beeswax", "beet", "beetle", "befall", "befell", "befit", "before",
    "beg", "began", "beggar", "begin", "beguile", "begun", "behalf", "behave",
    "behead", "behind", "behold", "beige", "being", "belabor", "belated", "belch",
    "belfry", "belie", "belief", "believe", "bell", "bellhop", "bellow", "bellows",
    "belly", "belong", "beloved", "below", "belt", "bemoan", "bench", "bend",
    "beneath", "benefit", "benign", "bent", "bequest", "bereft", "beret", "berry",
    "berserk", "berth", "beseech", "beset", "beside", "besides", "besiege", "best",
    "bestial", "bestow", "bet", "betray", "better", "between", "beware", "bewitch",
    "beyond", "bias", "bib", "bicker", "bicycle", "bid", "bide", "big",
    "bigamy", "bigot", "bike", "bikini", "bile", "bill", "billion", "billow",
    "bin", "binary", "bind", "binder", "binding", "bingo", "biology", "biped",
    "biplane", "birch", "bird", "birth", "bisect", "bishop", "bison", "bit",
    "bitch", "bite", "biting", "bitter", "bizarre", "blab", "black", "blacken",
    "bladder", "blade", "blame", "blanch", "bland", "blank", "blanket", "blankly",
    "blare", "blase", "blast", "blaze", "blazer", "bleach", "bleak", "bleary",
    "bleat", "bled", "bleed", "blemish", "blend", "bless", "blessed", "blew",
    "blight", "blimp", "blind", "blink", "blip", "bliss", "blister", "blithe",
    "blitz", "blob", "bloc", "block", "blond", "blood", "bloody", "bloom",
    "blossom", "blot", "blotch", "blotter", "blouse", "blow", "blowout", "blubber",
    "blue", "bluff", "blunder", "blunt", "bluntly", "blur", "blurt", "blush",
    "boa", "boar", "board", "boarder", "boast", "boat", "bob", "bobbin",
    "bobcat", "bobsled", "bode", "bodice", "bodily", "body", "bog", "boggle",
    "bogus", "boil", "boiler", "bold", "boldly", "bolster", "bolt", "bomb",
    "bombard", "bomber", "bond", "bondage", "bone", "bonfire", "bonnet", "bonus",
    "bony", "boo", "book", "bookend", "booklet", "boom", "boon", "boor",
    "boorish", "boost", "booster", "boot", "booth", "bootleg", "booty", "border",
    "bore", "boredom", "born", "borne", "borough", "borrow", "bosom", "boss",
    "bossy", "botany", "botch", "both", "bother", "bottle", "bottom", "bough",
    "bought", "boulder", "bounce", "bound", "bounty", "bouquet", "bourbon", "bout",
    "bovine", "bow", "bowel", "bowl", "box", "boxcar", "boxer", "boxing",
    "boy", "boycott", "boyhood", "boyish", "bra", "brace", "bracket", "brag",
    "braid", "brain", "brainy", "braise", "brake", "bran", "branch", "brand",
    "brandy", "brash", "brass", "brassy", "brat", "brave", "bravely", "bravery",
    "bravo", "brawl", "brawn", "brawny", "bray", "brazen", "brazier", "breach",
    "bread", "breadth", "break", "breast", "breath", "breathe", "bred", "breed",
    "breeder", "breeze", "breezy", "brevity", "brew", "brewery", "bribe", "brick",
    "bridal", "bride", "bridge", "bridle", "brief", "briefly", "brigade", "bright",
    "brim", "brine", "bring", "brink", "briny", "brisk", "briskly", "brittle",
    "broach", "broad", "broadly", "brocade", "broil", "broiler", "broke", "broken",
    "broker", "bronco", "bronze", "brooch", "brood", "brook", "broom", "broth",
    "brother", "brought", "brow", "brown", "brownie", "browse", "bruise", "brunch",
    "brunt", "brush", "brusque", "brutal", "brute", "brutish", "bubble", "bubbly",
    "buck", "bucket", "buckle", "bud", "buddy", "budge", "budget", "buff",
    "buffalo", "buffer", "buffet", "buffoon", "bug", "buggy", "bugle", "bugler",
    "build", "builder", "built", "bulb", "bulbous", "bulge", "bulk", "bulky",
    "bull", "bulldog", "bullet", "bullion", "bully", "bum", "bump", "bumper",
    "bumpy", "bun", "bunch", "bundle", "bungle", "bungler", "bunion", "bunk",
    "bunker", "bunny", "buoy", "burden", "bureau", "burglar", "burial", "burlap",
    "burly", "burn", "burner", "burnish", "burnt", "burp", "burro", "burrow",
    "burst", "bury", "bus", "bush", "bushed", "bushel", "bushy", "busily",
    "bust", "bustle", "busy", "but", "butcher", "butler", "butt", "butte",
    "butter", "button", "buxom", "buy", "buyer", "buzz", "buzzard", "buzzer",
    "by", "bygone", "bypass", "byway", "cab", "cabaret", "cabin", "cabinet",
    "cable", "caboose", "cacao", "cache", "cackle", "cactus", "cadence", "cadet",
    "cafe", "cage", "cagey", "cajole", "cake", "calf", "caliber", "calico",
    "call", "caller", "calling", "callous", "callus", "calm", "calmly", "calorie",
    "calves", "came", "camel", "cameo", "camera", "camp", "camper", "campus",
    "can", "canal", "canary", "cancel", "cancer", "candid", "candle", "candor",
    "candy", "cane", "canine", "canker", "cannon", "cannot", "canny", "canoe",
    "canon", "canopy", "canteen", "canter", "canvas", "canvass", "canyon", "cap",
    "capable", "capably", "cape", "caper", "caprice", "capsule", "captain", "caption",
    "captive", "captor", "capture", "car", "carat", "caravan", "carbon", "carcass",
    "card", "cardiac", "care", "career", "careful", "caress", "cargo", "caribou",
    "carnage", "carnal", "carol", "carouse", "carp", "carpet", "carrier", "carrion",
    "carrot", "carry", "cart", "cartel", "carton", "carve", "cascade", "case",
    "cash", "cashew", "cashier", "casing", "casino", "cask", "casket", "cast",
    "caste", "casting", "castle", "casual", "cat", "catalog", "catcall", "catch",
    "catchy", "cater", "caterer", "catfish", "catnap", "catnip", "cattle", "catwalk",
    "caucus", "caught", "cause", "caution", "cavalry", "cave", "cavern", "caviar",
    "cavity", "cavort", "caw", "cease", "cedar", "cede", "celery", "cell",
    "cellar", "cellist", "cello", "cement", "censor", "censure", "census", "cent",
    "center", "central", "century", "ceramic", "cereal", "chafe", "chaff", "chagrin",
    "chain", "chair", "chalet", "chalice", "chalk", "chalky", "chamber", "champ",
    "chance", "change", "channel", "chant", "chaos", "chap", "chapel", "chaps",
    "chapter", "char", "charge", "chariot", "charity", "charm", "chart", "charter",
    "chase", "chasm", "chassis", "chaste", "chasten", "chat", "chatter", "chatty",
    "cheap", "cheapen", "cheaply", "cheat", "check", "checkup", "cheek", "cheep",
    "cheer", "cheery", "cheese", "cheetah", "chef", "chemist", "cherish", "cherry",
    "cherub", "chess", "chest", "chew", "chewy", "chic", "chick", "chicken",
    "chide", "chief", "chiefly", "child", "chili", "chill", "chilly", "chime",
    "chimney", "chin", "china", "chink", "chintz", "chip", "chipper", "chirp",
    "chisel", "choice", "choir", "choke", "cholera", "choose", "choosy", "chop",
    "chopper", "choppy", "choral", "chord", "chore", "chortle", "chorus", "chose",
    "chosen", "chow", "chowder", "chrome", "chronic", "chubby", "chuck", "chuckle",
    "chug", "chum", "chummy", "chunk", "chunky", "church", "churn", "chute",
    "cider", "cigar", "cinch", "cinder", "cinema", "cipher", "circa", "circle",
    "circus", "cistern", "cite", "citizen", "citrus", "city", "civic", "civics",
    "civil", "clack", "clad", "claim", "clam", "clamber", "clammy", "clamor",
    "clamp", "clan", "clang", "clank", "clap", "clapper", "clarify", "clarity",
    "clash", "clasp", "class", "classic", "clatter", "clause", "claw", "clay",
    "clean", "cleaner", "cleanly", "cleanse", "clear", "clearly", "cleat", "cleave",
    "cleaver", "clef", "cleft", "clench", "clergy", "cleric", "clerk", "clever",
    "cliche", "click", "client", "cliff", "climate", "climax", "climb", "clinch",
    "cling", "clinic", "clink", "clip", "clique", "cloak", "clock", "clod",
    "clog", "close", "closely", "closet", "closure", "clot", "cloth", "clothe",
    "cloud", "cloudy", "clout", "clove", "clover", "clown", "club", "cluck",
    "clue", "clump", "clumsy", "clung", "cluster", "clutch", "clutter", "coach",
    "coal", "coarse", "coast", "coastal", "coaster", "coat", "coax", "cob",
    "cobalt", "cobbler", "cobra", "cobweb", "cocaine", "cock", "cockpit", "cocky",
    "cocoa", "coconut", "cocoon", "cod", "code", "coerce", "coffee", "coffer",
    "coffin", "cog", "cogency", "cogent", "cognac", "coil", "coin", "coinage",
    "coke", "cold", "coldly", "colic", "collage", "collar", "collect", "college",
    "collide", "collie", "colon", "colonel", "colony", "color", "colored", "colt",
    "column", "coma", "comb", "combat", "combine", "come", "comedy", "comely",
    "comet", "comfort", "comic", "comical", "coming", "comma", "command", "commend",
    "comment", "commit", "common", "commune", "commute", "compact", "company", "compare",
    "compass", "compel", "complex", "comply", "compose", "compost", "compute", "con",
    "concave", "conceal", "conceit", "concept", "concern", "concert", "concise", "concur",
    "condemn", "condone", "condor", "conduct", "cone", "confer", "confess", "confine",
    "confirm", "confuse", "congeal", "conical", "conifer", "conjure", "connect", "connote",
    "conquer", "consent", "consign", "consist", "console", "consort", "consul", "consult",
    "consume", "contact", "contain", "content", "contest", "context", "contort", "contour",
    "control", "convene", "convent", "convert", "convex", "convey", "convict", "convoy",
    "coo", "cook", "cookie", "cool", "cooler", "coolly", "coop", "cop",
    "cope", "copier", "copious", "copper", "copy", "coral", "cord", "cordial",
    "cordon", "core", "cork", "corn", "cornea", "corner", "cornet", "corny",
    "corps", "corpse", "corral", "correct", "corrupt", "corsage", "corset", "cosmic",
    "cosmos", "cost", "costly", "costume", "cot", "cottage", "cotton", "couch",
    "cougar", "cough", "could", "council", "count", "counter", "country", "county",
    "coup", "couple", "coupon", "courage", "courier", "course", "court", "cousin",
    "cove", "cover", "covert", "covet", "cow", "coward", "cowboy", "cower",
    "cowgirl", "cowhide", "coy", "coyote", "cozily", "cozy", "crab", "crabby",
    "crack", "cracker", "crackle", "cradle", "craft", "crafty", "crag", "craggy",
    "cram", "cramp", "crane", "cranium", "crank", "cranky", "crash", "crass",
    "crate", "crater", "crave", "craving", "crawl", "crayon", "craze", "crazily",
    "crazy", "creak", "creaky", "cream", "creamy", "crease", "create", "creator",
    "credit", "creed", "creek", "creep", "creepy", "cremate", "crepe", "crept",
    "crest", "crevice", "crew", "crib", "cricket", "crime", "crimson", "cringe",
    "crinkle", "cripple", "crises", "crisis", "crisp", "crisply", "critic", "croak",
    "crochet", "crock", "crocus", "crony", "crook", "crooked", "croon", "crop",
    "croquet", "cross", "crotch", "crouch", "crow", "crowbar", "crowd", "crown",
    "crucify", "crude", "crudely", "cruel", "cruelly", "cruelty", "cruise", "crumb",
    "crumble", "crumbly", "crummy", "crumple", "crunch", "crusade", "crush", "crust",
    "crusty", "crutch", "crux", "cry", "crypt", "cryptic", "crystal", "cub",
    "cube", "cubic", "cubicle", "cuckoo", "cuddle", "cue", "cuff", "cull",
    "culprit", "cult", "culture", "cunning", "cup", "cupful", "curable", "curator",
    "curb", "curd", "curdle", "cure", "curfew", "curio", "curious", "curl",
    "currant", "current", "curry", "curse", "cursory", "curt", "curtail", "curtain",
    "curtsy", "curve", "custard", "custom", "cut", "cutback", "cute", "cutlery",
    "cutlet", "cutter", "cutting", "cyanide", "cycle", "cyclist", "cyclone", "cymbal",
    "cynic", "cynical", "cypress", "cyst", "czar", "dab", "dabble", "dad",
    "dagger", "daily", "dainty", "dairy", "dais", "daisy", "dally", "dam",
    "damage", "dame", "damn", "damned", "damp", "dampen", "damsel", "dance",
    "dancer", "dandy", "danger", "dangle", "dank", "dapper", "dare", "daring",
    "dark", "darken", "darkly", "darling", "darn", "dart", "dash", "dashing",
    "data", "date", "daub", "daunt", "dawdle", "dawn", "day", "daze",
    "dazzle", "deacon", "dead", "deaden", "deadly", "deaf", "deal", "dealer",
    "dealt", "dean", "dear", "dearly", "dearth", "death", "debase", "debate",
    "debit", "debrief", "debris", "debt", "debtor", "debunk", "debut", "decade",
    "decay", "deceit", "deceive", "decency", "decent", "decibel", "decide", "decided",
    "decimal", "deck", "declare", "decline", "decode", "decoy", "decree", "decry",
    "deduce", "deduct", "deed", "deem", "deep", "deepen", "deeply", "deer",
    "deface", "defame", "default", "defeat", "defect", "defend", "defense", "defer",
    "defiant", "defile", "define", "deflect", "deform", "defraud", "defrost", "deft",
    "deftly", "defunct", "defy", "degrade", "degree", "deify", "deign", "deity",
    "delay", "delete", "deli", "delight", "delta", "delude", "deluge", "deluxe",
    "delve", "demand", "demean", "demerit", "demise", "demon", "demote", "demure",
    "den", "denial", "denim", "denote", "dense", "densely", "density", "dent",
    "dental", "dentist", "deny", "depart", "depend", "depict", "deplete", "deplore",
    "deport", "deposit", "depot", "depress", "deprive", "depth", "deputy", "derail",
    "deride", "derive", "derrick", "descent", "desert", "deserve", "design", "desire",
    "desist", "desk", "despair", "despise", "despite", "despot", "dessert", "destiny",
    "destroy", "detach", "detail", "detain", "detect", "deter", "detest", "detour",
    "detract", "develop", "deviate", "device", "devil", "devise", "devoid", "devote",
    "devoted", "devotee", "devour", "devout", "dew", "dial", "dialect", "diamond",
    "diaper", "diary", "dice", "dictate", "diction", "did", "die", "diesel",
    "diet", "dietary", "differ", "diffuse", "dig", "digest", "digit", "digital",
    "dignify", "dignity", "digress", "dike", "dilate", "dilemma", "dill", "dilute",
    "dim", "dime", "dimly", "dimple", "din", "dine", "diner", "dinghy",
    "dingy", "dinner", "diocese", "dip", "diploma", "dire", "direct", "dirge",
    "dirt", "dirty", "disable", "disarm", "disavow", "disband", "discard", "discern",
    "discus", "discuss", "disdain", "disease", "dish", "disk", "dislike", "dismal",
    "dismay", "dismiss", "disobey", "disown", "dispel", "display", "dispose", "dispute",
    "disrupt", "dissect", "dissent", "distant", "distill", "distort", "disturb", "disuse",
    "ditch", "dither", "ditto", "ditty", "dive", "diver", "diverge", "diverse",
    "divert", "divest", "divide", "divine", "divisor", "divulge", "dizzy", "do",
    "docile", "dock", "doctor", "dodge", "doe", "doer", "does", "dog",
    "dogged", "dogma", "doily", "dole", "doleful", "doll", "dollar", "dolly",
    "dolphin", "domain", "dome", "domino", "donate", "done", "donkey", "donor",
    "doodle", "doom", "door", "doorman", "doorway", "dope", "dopey", "dormant",
    "dorsal", "dose", "dot", "dote", "double", "doubt", "dough", "dour",
    "douse", "dove", "dowdy", "down", "downy", "dowry", "doze", "dozen",
    "drab", "draft", "drafty", "drag", "dragon", "drain", "drama", "drank",
    "drape", "drapery", "drastic", "draw", "drawer", "drawing", "drawl", "drawn",
    "dread", "dream", "dreamer", "dreamy", "dreary", "dredge", "dregs", "drench",
    "dress", "dressy", "drew", "dribble", "drift", "drill", "drink", "drinker",
    "drip", "drive", "driven", "driver", "drizzle", "droll", "drone", "drool",
    "droop", "drop", "dropout", "drought", "drove", "drown", "drowse", "drowsy",
    "drudge", "drug", "drum", "drummer", "drunk", "drunken", "dry", "dryly",
    "dryness", "dual", "dub", "dubious", "duck", "duct", "dud", "dude",
    "due", "duel", "duet", "dug", "dugout", "duke", "dull", "dully",
    "duly", "dumb", "dummy", "dump", "dumpy", "dunce", "dune", "dung",
    "dungeon", "dunk", "dupe", "duplex", "durable", "duress", "during", "dusk",
    "dusky", "dust", "dustpan", "dusty", "duty", "dwarf", "dwell", "dweller",
    "dwindle", "dye", "dying", "dynamic", "dynamo", "dynasty", "each", "eager",
    "eagerly", "eagle", "ear", "earache", "eardrum", "earl", "early", "earmark",
    "earn", "earnest", "earring", "earshot", "earth", "earthy", "ease", "easel",
    "easily", "east", "eastern", "easy", "eat", "eaten", "eaves", "ebb",
    "ebony", "echo", "eclair", "eclipse", "ecology", "economy", "ecstasy", "eczema",
    "eddy", "edge", "edgy", "edible", "edict", "edifice", "edit", "edition",
    "editor", "educate", "eel", "eerie", "effect", "effigy", "effort", "egg",
    "ego", "egotism", "egotist", "eight", "eighth", "eighty", "either", "eject",
    "eke", "elapse", "elastic", "elation", "elbow", "elder", "elderly", "eldest",
    "elect", "elegant", "elegy", "element", "elevate", "eleven", "elf", "elicit",
    "elite", "elk", "ellipse", "elm", "elope", "else", "elude", "elusive",
    "elves", "embalm", "embargo", "embark", "embassy", "embed", "ember", "emblem",
    "embody", "emboss", "embrace", "embryo", "emerald", "emerge", "emir", "emit",
    "emotion", "emperor", "empire", "employ", "empower", "empress", "empty", "emulate",
    "enable", "enact", "enamel", "encase", "enchant", "encore", "end", "endear",
    "endemic", "ending", "endive", "endless", "endorse", "endow", "endure", "enema",
    "enemy", "energy", "enforce", "engage", "engine", "engrave", "engross", "engulf",
    "enhance", "enigma", "enjoy", "enlist", "enliven", "enmity", "enough", "enrage",
    "enrich", "enroll", "ensign", "enslave", "ensue", "ensure", "entail", "enter",
    "entice", "entire", "entitle", "entity", "entrant", "entrap", "entreat", "entree",
    "entrust", "entry", "entwine", "envelop", "envious", "envoy", "envy", "enzyme",
    "eon", "epaulet", "epic", "epitaph", "epithet", "epitome", "epoch", "equal",
    "equally", "equate", "equine", "equinox", "equip", "equity", "era", "erase",
    "eraser", "erect", "erode", "erotic", "err", "errand", "errant", "erratic",
    "error", "erudite", "erupt", "escape", "escort", "essay", "estate", "esteem",
    "etch", "etching", "eternal", "ether", "ethical", "ethics", "ethnic", "eulogy",
    "evade", "evasion", "evasive", "eve", "even", "evening", "evenly", "event",
    "ever", "every", "evict", "evident", "evil", "evoke", "evolve", "ewe",
    "exact", "exactly", "exalt", "exam", "example", "exceed", "excel", "except",
    "excerpt", "excess", "excise", "excite", "exclaim", "exclude", "excuse", "execute",
    "exempt", "exert", "exhale", "exhibit", "exhort", "exhume", "exile", "exist",
    "exit", "exodus", "exotic", "expand", "expanse", "expect", "expel", "expend",
    "expense", "expert", "expire", "explain", "explode", "exploit", "explore", "export",
    "expose", "expound", "extend", "extent", "extol", "extort", "extra", "extract",
    "exude", "exult", "eye", "eyeball", "eyebrow", "eyelash", "eyelid", "eyesore",
    "fable", "fabric", "facade", "face", "facet", "facial", "facile", "fact",
    "factor", "factory", "factual", "faculty", "fad", "fade", "fail", "faint",
    "faintly", "fair", "fairly", "fairy", "faith", "fake", "falcon", "fall",
    "fallacy", "fallout", "false", "falsify", "falsity", "falter", "fame", "famed",
    "family", "famine", "famous", "fan", "fanatic", "fancy", "fanfare", "fang",
    "fantasy", "far", "faraway", "farce", "fare", "farm", "farmer", "farther",
    "fascism", "fascist", "fashion", "fast", "fasten", "fat", "fatal", "fatally",
    "fate", "fateful", "father", "fathom", "fatigue", "fatten", "fatty", "faucet",
    "fault", "faulty", "fauna", "favor", "fawn", "faze", "fear", "fearful",
    "feast", "feat", "feather", "feature", "feces", "fed", "federal", "fee",
    "feeble", "feed", "feeder", "feel", "feeler", "feeling", "feet", "feign",
    "feint", "feline", "fell", "fellow", "felon", "felony", "felt", "female",
    "fence", "fencing", "fend", "fender", "ferment", "fern", "ferret", "ferry",
    "fervent", "fervor", "fester", "festive", "festoon", "fetch", "fete", "fetid",
    "fetish", "fetter", "fetus", "feud", "feudal", "fever", "few", "fez",
    "fiance", "fiancee", "fiasco", "fib", "fibber", "fiber", "fickle", "fiction",
    "fiddle", "fiddler", "fidget", "field", "fiend", "fierce", "fiery", "fiesta",
    "fifteen", "fifth", "fifty", "fig", "fight", "fighter", "figment", "figure",
    "filch", "file", "fill", "fillet", "filly", "film", "filmy", "filter",
    "filth", "filthy", "fin", "final", "finale", "finally", "finance", "finch",
    "find", "finding", "fine", "finesse", "finger", "finish", "finite", "fir",
    "fire", "firearm", "firefly", "fireman", "firm", "firmly", "first", "fiscal",
    "fish", "fishery", "fishy", "fission", "fissure", "fist", "fit", "fitful",
    "fitness", "fitting", "five", "fix", "fixture", "fizz", "fizzle", "flabby",
    "flag", "flail", "flair", "flake", "flaky", "flame", "flank", "flannel",
    "flap", "flare", "flash", "flashy", "flask", "flat", "flatly", "flatten",
    "flatter", "flaunt", "flavor", "flaw", "flea", "fleck", "flee", "fleece",
    "fleecy", "fleet", "flesh", "fleshy", "flew", "flex", "flick", "flicker",
    "flier", "flight", "flimsy", "flinch", "fling", "flint", "flip", "flipper",
    "flirt", "flit", "float", "flock", "flog", "flood", "floor", "flop",
    "floppy", "flora", "floral", "florid", "florist", "floss", "flounce", "flour",
    "flout", "flow", "flower", "flown", "flu", "flue", "fluency", "fluent",
    "fluff", "fluffy", "fluid", "fluke", "flung", "flunk", "flunky", "flurry",
    "flush", "fluster", "flute", "flutist", "flutter", "flux", "fly", "foal",
    "foam", "foamy", "focal", "focus", "fodder", "foe", "fog", "foggy",
    "foghorn", "foible", "foil", "foist", "fold", "folder", "foliage", "folk",
    "folksy", "follow", "folly", "foment", "fond", "fondle", "fondly", "font",
    "food", "fool", "foolish", "foot", "footing", "for", "forage", "foray",
    "forbade", "forbear", "forbid", "force", "forceps", "ford", "fore", "forearm",
    "foreign", "foresaw", "foresee", "forest", "forever", "forfeit", "forgave", "forge",
    "forger", "forgery", "forget", "forgive", "forgo", "forgot", "fork", "form",
    "formal", "former", "formula", "forsake", "fort", "forte", "forth", "fortify",
    "fortune", "forty", "forum", "forward", "fossil", "foster", "fought", "foul",
    "found", "founder", "foundry", "four", "fourth", "fowl", "fox", "foxy",
    "foyer", "fracas", "frail", "frailty", "frame", "franc", "frank", "frankly",
    "frantic", "fraud", "fraught", "fray", "freak", "free", "freedom", "freely",
    "freeway", "freeze", "freezer", "freight", "frenzy", "fresh", "freshen", "fret",
    "fretful", "friar", "friend", "frieze", "fright", "frigid", "frill", "frilly",
    "fringe", "frisk", "frisky", "fritter", "frizzy", "fro", "frock", "frog",
    "frolic", "from", "frond", "front", "frontal", "frost", "frosty", "froth",
    "frothy", "frown", "froze", "frozen", "frugal", "fruit", "fruity", "fry",
    "fudge", "fuel", "fulcrum", "fulfill", "full", "fully", "fumble", "fume",
    "fun", "fund", "fungi", "fungus", "funnel", "funny", "fur", "furious",
    "furl", "furlong", "furnace", "furnish", "furor", "furrow", "furry", "further",
    "fury", "fuse", "fusion", "fuss", "fussy", "futile", "future", "fuzz",
    "fuzzy", "gab", "gable", "gadget", "gag", "gaiety", "gaily", "gain",
    "gainful", "gait", "gal", "gala", "galaxy", "gale", "gall", "gallant",
    "gallery", "galley", "gallon", "gallop", "gallows", "galore", "gambit", "gamble",
    "gambler", "game", "gamut", "gander", "gang", "gangway", "gap", "gape",
    "garage", "garb", "garbage", "garden", "gargle", "garish", "garland", "garlic",
    "garment", "garnet", "garnish", "garret", "garter", "gas", "gaseous", "gash",
    "gasket", "gasp", "gastric", "gate", "gateway", "gather", "gaudy", "gauge",
    "gaunt", "gauze", "gave", "gavel", "gawk", "gawky", "gay", "gaze",
    "gazelle", "gazette", "gear", "gee", "geese", "gelatin", "gem", "gender",
    "gene", "genera", "general", "generic", "genesis", "genetic", "genial", "genie",
    "genius", "gent", "gentile", "gentle", "gently", "gentry", "genuine", "genus",
    "geology", "germ", "get", "getaway", "geyser", "ghastly", "ghetto", "ghost",
    "ghostly", "ghoul", "giant", "giddy", "gift", "gifted", "gig", "giggle",
    "gild", "gill", "gilt", "gimmick", "gin", "ginger", "gingham", "girder",
    "girdle", "girl", "girlish", "girth", "gist", "give", "given", "glacial",
    "glacier", "glad", "gladden", "glade", "gladly", "glance", "gland", "glare",
    "glass", "glassy", "glaze", "gleam", "glean", "glee", "glen", "glib",
    "glibly", "glide", "glider", "glimmer", "glimpse", "glint", "glisten", "gloat",
    "global", "globe", "gloom", "gloomy", "glorify", "glory", "gloss", "glossy",
    "glove", "glow", "glower", "glucose", "glue", "glum", "glut", "gnarled",
    "gnash", "gnat", "gnaw", "gnome", "go", "goad", "goal", "goat",
    "goatee", "gob", "gobble", "goblet", "goblin", "god", "goddess", "godless",
    "godlike", "godly", "godsend", "gold", "golden", "golf", "golfer", "gondola",
    "gone", "goner", "gong", "good", "goody", "gooey", "goof", "goofy",
    "goon", "goose", "gopher", "gore", "gorge", "gorilla", "gory", "gosling",
    "gospel", "gossip", "got", "gotten", "gouge", "goulash", "gourd", "gout",
    "govern", "gown", "grab", "grace", "grade", "graft", "grain", "gram",
    "grammar", "grand", "grandly", "granite", "granny", "grant", "granule", "grape",
    "graph", "graphic", "grapple", "grasp", "grass", "grassy", "grate", "grater",
    "grating", "grave", "gravel", "gravely", "gravity", "gravy", "gray", "graze",
    "grease", "greasy", "great", "greatly", "greed", "greedy", "green", "greet",
    "gremlin", "grenade", "grew", "grid", "griddle", "grief", "grieve", "grill",
    "grim", "grime", "grimly", "grimy", "grin", "grind", "grinder", "grip",
    "gripe", "grisly", "gristle", "grit", "grits", "gritty", "groan", "grocer",
    "groggy", "groin", "groom", "groove", "groovy", "grope", "gross", "grotto",
    "grouch", "grouchy", "ground", "group", "grouse", "grove", "grovel", "grow",
    "grower", "growl", "grown", "growth", "grub", "grubby", "grudge", "gruel",
    "gruff", "gruffly", "grumble", "grumpy", "grunt", "guard", "guarded", "guess",
    "guest", "guffaw", "guide", "guild", "guile", "guilt", "guilty", "guise",
    "guitar", "gulch", "gulf", "gull", "gullet", "gully", "gulp", "gum",
    "gumdrop", "gummy", "gun", "gunfire", "gunman", "gunner", "gunshot", "guppy",
    "gurgle", "guru", "gush", "gusher", "gust", "gusty", "gut", "gutter",
    "guy", "guzzle", "gym", "gymnast", "gyrate", "ha", "habit", "habitat",
    "hack", "had", "haddock", "hag", "haggard", "haggle", "hail", "hair",
    "haircut", "hairdo", "hairy", "hale", "half", "halibut", "hall", "hallway",
    "halo", "halt", "halter", "halve", "halves", "ham", "hamlet", "hammer",
    "hamper", "hamster", "hand", "handbag", "handful", "handle", "handler", "handout",
    "handy", "hang", "hangar", "hanger", "hanging", "hangout", "hanker", "hapless",
    "happen", "happily", "happy", "harass", "harbor", "hard", "harden", "hardly",
    "hardy", "hare", "harem", "hark", "harlot", "harm", "harmful", "harmony",
    "harness", "harp", "harpist", "harpoon", "harry", "harsh", "harshly", "has",
    "hash", "hassle", "haste", "hasten", "hastily", "hasty", "hat", "hatch",
    "hate", "hateful", "hatred", "haughty", "haul", "haunt", "have", "haven",
    "havoc", "hawk", "hay", "haywire", "hazard", "haze", "hazel", "hazy",
    "he", "head", "heading", "headway", "heady", "heal", "healer", "health",
    "healthy", "heap", "hear", "heard", "hearing", "hearsay", "hearse", "heart",
    "hearten", "hearth", "hearty", "heat", "heater", "heathen", "heave", "heaven",
    "heavily", "heavy", "heckle", "heckler", "hectic", "hedge", "heed", "heel",
    "hefty", "heifer", "height", "heinous", "heir", "held", "helium", "hell",
    "hellish", "hello", "helm", "helmet", "help", "helper", "helping", "hem",
    "hemlock", "hemp", "hen", "hence", "her", "herald", "herb", "herd",
    "here", "hereby", "herein", "heresy", "heretic", "hermit", "hernia", "hero",
    "heroic", "heroin", "heroine", "heron", "herring", "hers", "herself", "hew",
    "hexagon", "hey", "heyday", "hi", "hiatus", "hiccup", "hick", "hickory",
    "hid", "hidden", "hide", "hideous", "high", "highly", "highway", "hijack",
    "hike", "hiker", "hill", "hilly", "hilt", "him", "himself", "hind",
    "hinder", "hinge", "hint", "hip", "hippie", "hire", "his", "hiss",
    "history", "hit", "hitch", "hither", "hive", "hives", "hoard", "hoarder",
    "hoarse", "hoax", "hobble", "hobby", "hobnob", "hobo", "hock", "hockey",
    "hoe", "hog", "hoist", "hold", "holder", "holdup", "hole", "holiday",
    "holler", "hollow", "holly", "holster", "holy", "homage", "home", "homely",
    "homey", "hone", "honest", "honey", "honk", "honor", "hood", "hoodlum",
    "hoof", "hook", "hoop", "hoot", "hop", "hope", "hopeful", "horde",
    "horizon", "horn", "horned", "hornet", "horny", "horrid", "horrify", "horror",
    "horse", "hose", "hosiery", "host", "hostage", "hostel", "hostess", "hostile",
    "hot", "hotbed", "hotel", "hothead", "hotly", "hound", "hour", "hourly",
    "house", "hovel", "hover", "how", "however", "howl", "hub", "hubbub",
    "huddle", "hue", "huff", "huffy", "hug", "huge", "hugely", "hulk",
    "hulking", "hull", "hum", "human", "humane", "humanly", "humble", "humbly",
    "humdrum", "humid", "humor", "hump", "hunch", "hundred", "hung", "hunger",
    "hungry", "hunk", "hunt", "hunter", "hurdle", "hurl", "hurry", "hurt",
    "hurtful", "hurtle", "husband", "hush", "husk", "huskily", "husky", "hustle",
    "hustler", "hut", "hutch", "hybrid", "hydrant", "hyena", "hygiene", "hymn",
    "hymnal", "hyphen", "ice", "iceberg", "icicle", "icing", "icy", "idea",
    "ideal", "ideally", "idiocy", "idiom", "idiot", "idiotic", "idle", "idly",
    "idol", "idolize", "if", "igloo", "ignite", "ignore", "iguana", "ill",
    "illegal", "illicit", "illness", "image", "imagery", "imagine", "imitate", "immense",
    "immerse", "immoral", "immune", "imp", "impact", "impair", "impale", "impart",
    "impasse", "impeach", "impede", "impel", "imperil", "impetus", "impinge", "impish",
    "implant", "implore", "imply", "import", "impose", "impound", "impress", "imprint",
    "improve", "impulse", "impure", "in", "inane", "inborn", "inbred", "incense",
    "incest", "inch", "incisor", "incite", "incline", "income", "incur", "indeed",
    "indent", "index", "indict", "indigo", "indoor", "indoors", "induce", "induct",
    "inept", "inert", "inertia", "inexact", "infamy", "infancy", "infant", "infect",
    "infer", "inferno", "infest", "infidel", "infield", "infirm", "inflame", "inflate",
    "inflict", "influx", "inform", "infuse", "ingest", "inhabit", "inhale", "inhaler",
    "inherit", "inhibit", "inhuman", "initial", "inject", "injure", "injury", "ink",
    "inkling", "inky", "inlaid", "inland", "inlay", "inlet", "inmate", "inn",
    "innards", "innate", "inner", "inning", "input", "inquire", "inquiry", "insane",
    "insect", "insert", "inside", "insider", "insight", "insipid", "insist", "inspire",
    "install", "instead", "instep", "instill", "insular", "insulin", "insult", "insure",
    "intact", "intake", "integer", "intend", "intense", "intent", "inter", "interim",
    "intern", "into", "intrude", "invade", "invader", "invalid", "invent", "inverse",
    "invert", "invest", "invite", "invoke", "involve", "inward", "iodine", "ion",
    "iota", "irate", "ire", "iris", "irk", "iron", "ironic", "irony",
    "is", "island", "isle", "isolate", "issue", "isthmus", "it", "italic",
    "itch", "itchy", "item", "itemize", "its", "itself", "ivory", "ivy",
    "jab", "jabber", "jack", "jackal", "jackass", "jacket", "jade", "jagged",
    "jaguar", "jail", "jailer", "jalopy", "jam", "jamb", "jangle", "janitor",
    "jar", "jargon", "jaunt", "jaunty", "javelin", "jaw", "jawbone", "jay",
    "jaywalk", "jazz", "jealous", "jeans", "jeer", "jell", "jelly", "jerk",
    "jerky", "jersey", "jest", "jester", "jet", "jetty", "jewel", "jeweler",
    "jewelry", "jibe", "jiffy", "jig", "jiggle", "jigsaw", "jilt", "jingle",
    "jinx", "jitters", "job", "jockey", "jocular", "jog", "jogger", "join",
    "joint", "jointly", "joke", "joker", "jolly", "jolt", "jostle", "jot",
    "journal", "journey", "jovial", "joy", "joyful", "joyous", "jubilee", "judge",
    "judo", "jug", "juggle", "juggler", "jugular", "juice", "juicy", "jumble",
    "jumbo", "jump", "jumper", "jumpy", "jungle", "junior", "juniper", "junk",
    "junket", "junkie", "junta", "juror", "jury", "just", "justice", "justify",
    "jut", "jute", "karat", "karate", "kayak", "keel", "keen", "keenly",
    "keep", "keeper", "keeping", "keg", "kelp", "kennel", "kept", "kernel",
    "kettle", "key", "keyhole", "keynote", "khaki", "kick", "kickoff", "kid",
    "kidnap", "kidney", "kill", "killer", "kiln", "kilo", "kilt", "kimono",
    "kin", "kind", "kindle", "kindly", "kindred", "kinfolk", "king", "kingdom",
    "kink", "kinky", "kinship", "kiosk", "kiss", "kit", "kite", "kitten",
    "kitty", "kiwi", "knack", "knead", "knee", "kneecap", "kneel", "knelt",
    "knew", "knife", "knight", "knit", "knives", "knob", "knock", "knocker",
    "knoll", "knot", "knotty", "know", "knowing", "known", "koala", "kosher",
    "kowtow", "kudos", "lab", "label", "labor", "laborer", "lace", "lack",
    "lacquer", "lacy", "lad", "ladder", "laden", "ladle", "lady", "ladybug",
    "lag", "laggard", "lagoon", "laid", "lain", "lair", "lake", "lamb",
    "lame", "lament", "lamp", "lance", "land", "landing", "lane", "languor",
    "lanky", "lantern", "lap", "lapel", "lapse", "lard", "large", "largely",
    "lark", "larva", "larvae", "larynx", "laser", "lash", "lass", "last",
    "lasting", "lastly", "latch", "late", "lately", "latent", "lateral", "latex",
    "lathe", "lather", "latter", "lattice", "laud", "laugh", "launch", "launder",
    "laundry", "laurel", "lava", "lavish", "law", "lawful", "lawless", "lawn",
    "lawsuit", "lawyer", "lax", "laxity", "lay", "layer", "layman", "layout",
    "lazy", "lead", "leaden", "leader", "leaf", "leafy", "league", "leak",
    "leakage", "lean", "leap", "learn", "learned", "lease", "leash", "least",
    "leather", "leave", "leaves", "lectern", "lecture", "led", "ledge", "ledger",
    "leech", "leek", "leer", "leery", "leeway", "left", "leg", "legacy",
    "legal", "legally", "legend", "legible", "legibly", "legion", "legume", "lemon",
    "lend", "length", "lengthy", "lenient", "lens", "lent", "lentil", "leotard",
    "leper", "leprosy", "lesbian", "lesion", "less", "lessen", "lesser", "lesson",
    "lest", "let", "letdown", "lethal", "letter", "lettuce", "letup", "levee",
    "level", "lever", "levity", "levy", "lewd", "liable", "liaison", "liar",
    "libel", "liberal", "liberty", "library", "lice", "license", "lichen", "lick",
    "lid", "lie", "lieu", "life", "lift", "light", "lighten", "lighter",
    "lightly", "like", "likely", "liken", "liking", "lilac", "lilt", "lily",
    "limb", "limber", "lime", "limit", "limited", "limp", "line", "linear",
    "linen", "liner", "linger", "lingo", "lining", "link", "lint", "lion",
    "lioness", "lip", "liqueur", "liquid", "liquor", "lisp", "list", "listen",
    "lit", "litany", "liter", "literal", "lithe", "litter", "little", "liturgy",
    "livable", "live", "lively", "liven", "liver", "lives", "livid", "living",
    "lizard", "llama", "load", "loaf", "loafer", "loam", "loan", "loath",
    "loathe", "loaves", "lob", "lobby", "lobe", "lobster", "local", "locale",
    "locally", "locate", "lock", "locker", "locket", "locust", "lodge", "lodger",
    "lodging", "loft", "lofty", "log", "logic", "logical", "loin", "loiter",
    "loll", "lone", "lonely", "long", "longing", "look", "lookout", "loom",
    "loon", "loony", "loop", "loose", "loosely", "loosen", "loot", "lop",
    "lope", "lord", "lore", "lose", "loser", "loss", "lost", "lot",
    "lotion", "lottery", "lotus", "loud", "loudly", "lounge", "louse", "lousy",
    "lovable", "love", "lovely", "lover", "loving", "low", "lowdown", "lower",
    "lowly", "loyal", "loyalty", "lozenge", "lucid", "luck", "luckily", "lucky",
    "lug", "luggage", "lull", "lumber", "lump", "lumpy", "lunacy", "lunar",
    "lunatic", "lunch", "lung", "lunge", "lurch", "lure", "lurid", "lurk",
    "lush", "lust", "luster", "lusty", "lute", "luxury", "lye", "lying",
    "lymph", "lynch", "lyre", "m", "macabre", "mace", "machete", "machine",
    "mad", "madam", "madcap", "madden", "made", "madly", "madman", "madness",
    "magenta", "maggot", "magic", "magical", "magnate", "magnet", "magnify", "magpie",
    "maid", "maiden", "mail", "mailbox", "mailman", "maim", "main", "mainly",
    "major", "make", "makeup", "malady", "malaria", "male", "malice", "malign",
    "mall", "mallard", "mallet", "malt", "mama", "mammal", "man", "manacle",
    "manage", "manager", "mandate", "mane", "mange", "manger", "mangle", "mango",
    "mangy", "manhole", "manhood", "mania", "maniac", "mankind", "manly", "manner",
    "mannish", "manor", "mansion", "mantel", "mantle", "manual", "manure", "many",
    "map", "maple", "mar", "marble", "march", "mare", "margin", "marina",
    "marine", "mariner", "marital", "mark", "marked", "marker", "market", "maroon",
    "marquee", "marrow", "marry", "marsh", "marshal", "marshy", "mart", "martial",
    "martyr", "marvel", "mascara", "mascot", "mash", "mask", "mason", "masonry",
    "mass", "massage", "massive", "mast", "master", "mastery", "mat", "matador",
    "match", "mate", "math", "matron", "matter", "matting", "mature", "maudlin",
    "maul", "mauve", "maxim", "may", "maybe", "mayhem", "mayor", "maze",
    "me", "meadow", "meager", "meal", "mealy", "mean", "meander", "meant",
    "measles", "measly", "meat", "medal", "meddle", "meddler", "media", "mediate",
    "medical", "medium", "medley", "meek", "meekly", "meet", "meeting", "megaton",
    "mellow", "melodic", "melody", "melon", "melt", "member", "memento", "memo",
    "memory", "men", "menace", "mend", "menial", "mental", "menthol", "mention",
    "mentor", "menu", "meow", "mercury", "mercy", "mere", "merely", "merge",
    "merger", "merit", "mermaid", "merry", "mesh", "mess", "message", "messy",
    "met", "metal", "mete", "meteor", "meter", "method", "metric", "mettle",
    "mew", "mice", "microbe", "midday", "middle", "midget", "midriff", "midst",
    "midway", "mien", "might", "mighty", "migrant", "migrate", "mike", "mild",
    "mildew", "mildly", "mile", "mileage", "militia", "milk", "milkman", "milky",
    "mill", "miller", "million", "mime", "mimic", "mimicry", "mince", "mind",
    "mine", "miner", "mineral", "mingle", "minimal", "mink", "minnow", "minor",
    "mint", "minuet", "minus", "minute", "miracle", "mirage", "mire", "mirror",
    "mirth", "misdeed", "miser", "miserly", "misery", "misfit", "mishap", "mislaid",
    "mislay", "mislead", "misread", "miss", "missile", "mission", "missive", "mist",
    "mistake", "mistook", "misty", "misuse", "mite", "mitt", "mitten", "mix",
    "mixer", "mixture", "moan", "moat", "mob", "mobile", "mock", "mockery",
    "mode", "model", "modern", "modest", "modicum", "modify", "modular", "module",
    "mohair", "moist", "moisten", "molar", "mold", "molding", "moldy", "mole",
    "molest", "mollify", "mollusk", "molt", "molten", "mom", "moment", "monarch",
    "money", "mongrel", "monitor", "monk", "monkey", "monsoon", "monster", "month",
    "moo", "mood", "moodily", "moody", "moon", "moor", "mooring", "moose",
    "moot", "mop", "mope", "moral", "morale", "morally", "morass", "morbid",
    "more", "morgue", "morn", "morning", "moron", "morose", "morsel", "mortal",
    "mortar", "mortify", "mosaic", "mosque", "moss", "mossy", "most", "mostly",
    "motel", "moth", "mother", "motif", "motion", "motive", "motley", "motor",
    "motto", "mound", "mount", "mourn", "mourner", "mouse", "mousse", "mousy",
    "mouth", "move", "mover", "movie", "mow", "mower", "much", "muck",
    "mucous", "mucus", "mud", "muddle", "muddy", "muff", "muffin", "muffle",
    "mug", "mugger", "muggy", "mulch", "mule", "mull", "mum", "mumble",
    "mummify", "mummy", "mumps", "munch", "mundane", "mural", "murder", "murky",
    "murmur", "muscle", "muse", "museum", "mush", "mushy", "music", "musical",
    "musk", "musket", "muss", "mussel", "must", "mustang", "muster", "musty",
    "mutant", "mutate", "mute", "mutely", "mutiny", "mutt", "mutter", "mutton",
    "mutual", "muzzle", "my", "myopic", "myriad", "myself", "mystery", "mystic",
    "mystify", "myth", "nab", "nag", "nail", "naive", "naively", "naked",
    "name", "namely", "nap", "napalm", "nape", "napkin", "narrate", "narrow",
    "nasal", "nastily", "nasty", "nation", "native", "natty", "natural", "nature",
    "naught", "naughty", "nausea", "naval", "navel", "navy", "nay", "near",
    "nearby", "nearly", "neat", "neatly", "nebula", "neck", "necktie", "nectar",
    "nee", "need", "needle", "needy", "negate", "neglect", "neigh", "neither",
    "neon", "nephew", "nerve", "nervous", "nest", "nestle", "net", "netting",
    "nettle", "network", "neuter", "neutral", "neutron", "never", "new", "newborn",
    "newly", "news", "newsy", "newt", "next", "nibble", "nice", "nicely",
    "niche", "nick", "nickel", "niece", "nifty", "night", "nightly", "nil",
    "nimble", "nimbly", "nine", "ninety", "ninny", "ninth", "nip", "nipple",
    "nippy", "nit", "nitrate", "nitwit", "no", "noble", "nobly", "nobody",
    "nod", "node", "noise", "noisily", "noisy", "nomad", "nomadic", "nominal",
    "nominee", "none", "nonstop", "noodle", "nook", "noon", "noose", "nor",
    "norm", "normal", "north", "nose", "nostril", "nosy", "not", "notably",
    "notch", "note", "noted", "nothing", "notice", "notify", "notion", "nougat",
    "noun", "nourish", "novel", "novelty", "novice", "now", "noxious", "nozzle",
    "nuance", "nuclear", "nuclei", "nucleus", "nude", "nudge", "nudity", "nugget",
    "null", "nullify", "numb", "number", "nun", "nuptial", "nurse", "nursery",
    "nut", "nutmeg", "nuts", "nutty", "nuzzle", "nylon", "nymph", "oaf",
    "oak", "oar", "oases", "oasis", "oath", "oatmeal", "obelisk", "obese",
    "obesity", "obey", "object", "oblige", "oblique", "oblong", "oboe", "obscene",
    "obscure", "observe", "obsess", "obtain", "obtuse", "obvious", "occupy", "occur",
    "ocean", "oceanic", "octagon", "octave", "octopus", "ocular", "odd", "oddity",
    "odds", "ode", "odious", "odor", "of", "off", "offbeat", "offend",
    "offer", "offhand", "office", "offing", "offset", "often", "ogle", "ogre",
    "oh", "ohm", "oil", "oily", "okra", "old", "olden", "olive",
    "omelet", "omen", "ominous", "omit", "on", "once", "one", "onerous",
    "oneself", "onion", "only", "onrush", "onset", "onto", "onus", "onward",
    "oodles", "ooze", "opal", "opaque", "open", "opener", "opening", "openly",
    "opera", "operate", "opinion", "opium", "oppose", "oppress", "opt", "optic",
    "optical", "optimum", "option", "opulent", "or", "oracle", "oral", "orange",
    "oration", "orator", "oratory", "orbit", "orbital", "orchard", "orchid", "ordain",
    "ordeal", "order", "orderly", "ore", "organ", "organic", "orgy", "orient",
    "origin", "ornate", "orphan", "ostrich", "other", "otter", "ouch", "ought",
    "ounce", "our", "ours", "oust", "ouster", "out", "outcast", "outcome",
    "outcry", "outdid", "outdo", "outdone", "outdoor", "outer", "outfit", "outgrow",
    "outing", "outlast", "outlaw", "outlay", "outlet", "outline", "outlive", "outlook",
    "outpost", "output", "outrun", "outset", "outward", "outwit", "ova", "oval",
    "ovary", "ovation", "oven", "over", "overall", "overdid", "overdo", "overdue",
    "overeat", "overlap", "overly", "overran", "overrun", "oversaw", "overt", "overtly",
    "ovum", "owe", "owl", "own", "owner", "ox", "oxen", "oxide",
    "oxidize", "oxygen", "oyster", "ozone", "pa", "pace", "pacific", "pacify",
    "pack", "packer", "packet", "pact", "pad", "padding", "paddle", "paddock",
    "paddy", "padlock", "pagan", "page", "pageant", "pagoda", "paid", "pail",
    "pain", "painful", "paint", "pair", "pajamas", "pal", "palace", "palate",
    "pale", "palette", "pall", "pallid", "pallor", "palm", "paltry", "pamper",
    "pan", "panacea", "pancake", "panda", "pander", "pane", "panel", "pang",
    "panic", "panicky", "pansy", "pant", "panther", "pantry", "pants", "papa",
    "papacy", "papal", "papaya", "paper", "paprika", "papyrus", "par", "parable",
    "parade", "paradox", "paragon", "parasol", "parcel", "parch", "pardon", "pare",
    "parent", "parish", "parity", "park", "parka", "parkway", "parlor", "parody",
    "parole", "parrot", "parsley", "parsnip", "parson", "part", "partake", "partial",
    "parting", "partly", "partner", "partook", "party", "pass", "passe", "passing",
    "passion", "past", "pasta", "paste", "pastel", "pastime", "pastor", "pastry",
    "pasty", "pat", "patch", "pate", "patent", "path", "pathos", "pathway",
    "patient", "patio", "patriot", "patrol", "patron", "patter", "patty", "paucity",
    "paunch", "pauper", "pause", "pave", "paw", "pawn", "pay", "payment",
    "payoff", "payroll", "pea", "peace", "peach", "peacock", "peak", "peaked",
    "peal", "peanut", "pear", "pearl", "peasant", "peat", "pebble", "pecan",
    "peck", "pedal", "peddle", "peek", "peel", "peep", "peer", "peeve",
    "peevish", "peg", "pelican", "pellet", "pelt", "pelvic", "pelvis", "pen",
    "penal", "penalty", "penance", "pencil", "pendant", "penguin", "penis", "pennant",
    "penny", "pension", "peon", "peony", "people", "pep", "pepper", "per",
    "percent", "perch", "perfect", "perform", "perfume", "peril", "period", "perish",
    "perjure", "perk", "perky", "permit", "perplex", "persist", "person", "pert",
    "pertain", "perturb", "perusal", "peruse", "pervade", "pervert", "pesky", "pest",
    "pester", "pet", "petal", "peter", "petite", "petrify", "petty", "pew",
    "pewter", "phantom", "phase", "phlegm", "phobia", "phone", "phonics", "phony",
    "photo", "phrase", "physics", "pianist", "piano", "piccolo", "pick", "pickax",
    "picket", "pickle", "pickup", "picky", "picnic", "picture", "pie", "piece",
    "pier", "pierce", "piety", "pig", "pigeon", "piggish", "pigment", "pigpen",
    "pigtail", "pike", "pile", "pilfer", "pilgrim", "pill", "pillage", "pillar",
    "pillow", "pilot", "pimple", "pimply", "pin", "pinch", "pine", "pinion",
    "pink", "pint", "pioneer", "pious", "pipe", "piping", "pique", "piracy",
    "pirate", "pistol", "piston", "pit", "pitch", "piteous", "pitfall", "pithy",
    "pitiful", "pity", "pivot", "pivotal", "pixie", "pizza", "placard", "placate",
    "place", "placid", "plague", "plaid", "plain", "plainly", "plan", "plane",
    "planet", "plank", "plant", "planter", "plaque", "plasma", "plaster", "plastic",
    "plate", "plateau", "platoon", "platter", "play", "player", "playful", "playpen",
    "plaza", "plea", "plead", "please", "pleat", "pledge", "plenty", "pliant",
    "pliers", "plight", "plod", "plop", "plot", "plow", "ploy", "pluck",
    "plug", "plum", "plumage", "plumber", "plume", "plummet", "plump", "plunge",
    "plural", "plus", "plush", "ply", "plywood", "poach", "poacher", "pocket",
    "pod", "podium", "poem", "poet", "poetic", "poetry", "point", "pointed",
    "pointer", "poise", "poison", "poke", "poker", "polar", "pole", "polemic",
    "police", "policy", "polish", "polite", "polka", "poll", "pollen", "pollute",
    "polo", "polygon", "polyp", "pomp", "pompous", "poncho", "pond", "ponder",
    "pontoon", "pony", "poodle", "pool", "poop", "poor", "poorly", "pop",
    "poplar", "poppy", "popular", "porch", "pore", "pork", "porous", "port",
    "portal", "portend", "portent", "porter", "portion", "portly", "portray", "pose",
    "post", "postage", "postal", "poster", "posture", "posy", "pot", "potato",
    "potent", "pothole", "potion", "potter", "pottery", "pouch", "poultry", "pounce",
    "pound", "pour", "pout", "poverty", "powder", "powdery", "power", "powwow",
    "prairie", "praise", "prance", "prank", "prattle", "prawn", "pray", "prayer",
    "preach", "precede", "precise", "predict", "preempt", "preen", "preface", "prefer",
    "prefix", "prelude", "premier", "premise", "premium", "prepaid", "prepare", "present",
    "preside", "press", "presume", "pretend", "pretext", "pretty", "pretzel", "prevail",
    "prevent", "preview", "prey", "price", "prick", "prickle", "prickly", "pride",
    "priest", "prim", "primal", "primary", "primate", "prime", "primer", "primly",
    "primp", "prince", "print", "printer", "prior", "prism", "prison", "private",
    "privy", "prize", "pro", "probe", "problem", "proceed", "procure", "prod",
    "product", "profane", "profess", "proffer", "profile", "profit", "profuse", "progeny",
    "program", "project", "prolong", "prom", "promise", "promote", "prompt", "prone",
    "prong", "pronoun", "proof", "prop", "propel", "proper", "prophet", "propose",
    "prose", "prosper", "protect", "protege", "protein", "protest", "proton", "proud",
    "prove", "proverb", "provide", "provoke", "prow", "prowess", "prowl", "prowler",
    "proxy", "prude", "prudent", "prudish", "prune", "pry", "psalm", "psyche",
    "psychic", "puberty", "public", "puck", "pucker", "pudding", "puddle", "pudgy",
    "pueblo", "puff", "puffy", "puke", "pull", "pulley", "pulp", "pulpit",
    "pulsate", "pulse", "puma", "pumice", "pummel", "pump", "pumpkin", "pun",
    "punch", "pundit", "pungent", "punish", "punk", "punt", "puny", "pup",
    "pupil", "puppet", "puppy", "pure", "puree", "purely", "purge", "purify",
    "purity", "purple", "purport", "purpose", "purr", "purse", "pursue", "pursuit",
    "pus", "push", "pusher", "pushy", "puss", "put", "putrid", "putt",
    "putter", "putty", "puzzle", "pyre", "python", "quack", "quail", "quaint",
    "quake", "qualify", "quality", "qualm", "quarrel", "quarry", "quart", "quarter",
    "quartet", "quartz", "quash", "quaver", "quay", "queasy", "queen", "queenly",
    "queer", "quell", "quench", "query", "quest", "quibble", "quick", "quicken",
    "quickly", "quiet", "quietly", "quill", "quilt", "quinine", "quintet", "quip",
    "quirk", "quit", "quite", "quiver", "quiz", "quorum", "quota", "quote",
    "rabbi", "rabbit", "rabble", "rabid", "rabies", "race", "racial", "racism",
    "racist", "rack", "racket", "racy", "radar", "radiate", "radical", "radii",
    "radio", "radish", "radium", "radius", "raffle", "raft", "rafter", "rag",
    "rage", "ragged", "ragtime", "raid", "raider", "rail", "rain", "rainbow",
    "rainy", "raise", "raisin", "rake", "rally", "ram", "ramble", "rambler",
    "ramp", "rampage", "ramrod", "ran", "ranch", "rancid", "rancor", "random",
    "rang", "range", "ranger", "rank", "rankle", "ransack", "ransom", "rant",
    "rap", "rape", "rapid", "rapidly", "rapport", "rapt", "rapture", "rare",
    "rarely", "rarity", "rascal", "rash", "rashly", "rasp", "rat", "rate",
    "rather", "ratify", "rating", "ratio", "ration", "rattle", "rattler", "raucous",
    "ravage", "rave", "ravel", "raven", "ravine", "ravish", "raw", "ray",
    "rayon", "raze", "razor", "re", "reach", "react", "reactor", "read",
    "reader", "reading", "ready", "real", "realism", "realist", "reality", "realize",
    "really", "realm", "realty", "ream", "reap", "reaper", "rear", "reason",
    "rebate", "rebel", "rebirth", "rebound", "rebuff", "rebuild", "rebuke", "rebut",
    "recall", "recant", "recap", "recede", "receipt", "receive", "recent", "recess",
    "recipe", "recital", "recite", "reckon", "reclaim", "recline", "recluse", "recoil",
    "record", "recount", "recoup", "recover", "recruit", "rectal", "rectify", "rector",
    "rectum", "recur", "recycle", "red", "redden", "redeem", "redhead", "redo",
    "redress", "reduce", "reed", "reef", "reek", "reel", "refer", "refill",
    "refine", "refined", "reflect", "reflex", "reform", "refresh", "refuel", "refuge",
    "refugee", "refund", "refusal", "refuse", "refute", "regain", "regal", "regale",
    "regalia", "regard", "regatta", "regent", "regime", "regimen", "region", "regress",
    "regret", "regular", "rehash", "reign", "rein", "reject", "rejoin", "relapse",
    "relate", "related", "relax", "relay", "release", "relent", "reliant", "relic",
    "relief", "relieve", "relish", "relive", "rely", "remain", "remains", "remark",
    "remedy", "remind", "remiss", "remit", "remnant", "remodel", "remorse", "remote",
    "remove", "rend", "render", "renege", "renew", "renewal", "renown", "rent",
    "rental", "repair", "repay", "repeal", "repeat", "repel", "repent", "replace",
    "replete", "replica", "reply", "report", "repose", "repress", "reprove", "repulse",
    "repute", "request", "require", "rescind", "rescue", "rescuer", "resent", "reserve",
    "reside", "resign", "resin", "resist", "resolve", "resort", "resound", "respect",
    "respite", "respond", "rest", "restive", "restore", "result", "resume", "retail",
    "retain", "retard", "retch", "retina", "retire", "retort", "retrace", "retract",
    "retreat", "return", "reunion", "reunite", "rev", "revamp", "reveal", "revel",
    "reveler", "revelry", "revenge", "revenue", "revere", "reverie", "reverse", "revert",
    "review", "revile", "revise", "revival", "revive", "revoke", "revolt", "revolve",
    "revue", "reward", "rewrite", "rhino", "rhyme", "rhythm", "rib", "ribbon",
    "rice", "rich", "riches", "richly", "rickety", "rid", "riddle", "ride",
    "rider", "ridge", "rife", "rifle", "rift", "rig", "rigging", "right",
    "rightly", "rigid", "rigidly", "rigor", "rile", "rim", "rind", "ring",
    "ringlet", "rink", "rinse", "riot", "rioter", "riotous", "rip", "ripe",
    "ripen", "ripple", "rise", "risen", "riser", "risk", "risky", "risque",
    "rite", "ritual", "rival", "rivalry", "river", "rivet", "roach", "road",
    "roam", "roar", "roast", "rob", "robber", "robbery", "robe", "robin",
    "robot", "robust", "rock", "rocker", "rocket", "rocky", "rod", "rode",
    "rodent", "rodeo", "roe", "rogue", "roguish", "role", "roll", "roller",
    "romance", "romp", "roof", "roofing", "rook", "rookie", "room", "roomy",
    "roost", "rooster", "root", "rope", "rosary", "rose", "roster", "rosy",
    "rot", "rotary", "rotate", "rote", "rotor", "rotten", "rotund", "rotunda",
    "rouge", "rough", "roughen", "roughly", "round", "rouse", "rout", "route",
    "routine", "row", "rowboat", "rowdy", "royal", "royally", "royalty", "rub",
    "rubber", "rubbish", "rubble", "ruby", "ruckus", "rudder", "ruddy", "rude",
    "rudely", "rue", "rueful", "ruff", "ruffian", "ruffle", "rug", "rugged",
    "ruin", "ruinous", "rule", "ruler", "rum", "rumble", "rummage", "rummy",
    "rumor", "rump", "rumple", "run", "runaway", "rundown", "rung", "runner",
    "running", "runny", "runt", "runway", "rural", "ruse", "rush", "rust",
    "rustic", "rustle", "rustler", "rusty", "rut", "rye", "saber", "sac",
    "sack", "sacred", "sad", "sadden", "saddle", "sadism", "sadist", "sadly",
    "safari", "safe", "safely", "safety", "saffron", "sag", "saga", "sage",
    "said", "sail", "sailor", "saint", "saintly", "sake", "salad", "salami",
    "salary", "sale", "saliva", "sallow", "salmon", "salon", "saloon", "salt",
    "salty", "salute", "salvage", "salve", "same", "sample", "sand", "sandal",
    "sandbag", "sandman", "sandy", "sane", "sang", "sanity", "sank", "sap",
    "sapling", "sarcasm", "sari", "sash", "sassy", "sat", "satin", "satire",
    "satisfy", "sauce", "saucer", "saucy", "sauna", "saunter", "sausage", "saute",
    "savage", "save", "savior", "savor", "savory", "savvy", "saw", "sawdust",
    "say", "saying", "scab", "scald", "scale", "scallop", "scalp", "scalpel",
    "scaly", "scamper", "scan", "scandal", "scant", "scanty", "scar", "scarce",
    "scare", "scarf", "scarlet", "scary", "scatter", "scene", "scenery", "scenic",
    "scent", "scepter", "scheme", "schemer", "scholar", "school", "science", "scoff",
    "scold", "scoop", "scoot", "scope", "scorch", "score", "scorn", "scour",
    "scout", "scowl", "scram", "scrap", "scrape", "scratch", "scrawl", "scrawny",
    "scream", "screech", "screen", "screw", "screwy", "scribe", "script", "scroll",
    "scrub", "scruff", "scruffy", "scruple", "scuff", "scuffle", "scum", "scurry",
    "scuttle", "scythe", "sea", "seal", "seam", "seaman", "seaport", "sear",
    "search", "seasick", "season", "seat", "seaweed", "secede", "second", "secrecy",
    "secret", "secrete", "sect", "section", "sector", "secure", "sedan", "sedate",
    "seduce", "see", "seed", "seedy", "seek", "seem", "seen", "seep",
    "seesaw", "seethe", "segment", "seize", "seizure", "seldom", "select", "self",
    "selfish", "sell", "seller", "selves", "semen", "seminar", "senate", "senator",
    "send", "senile", "senior", "sense", "sensor", "sensory", "sensual", "sent",
    "sentry", "sequel", "sequin", "serene", "serial", "series", "serious", "sermon",
    "serpent", "serum", "serve", "server", "service", "servile", "session", "set",
    "setback", "setter", "setting", "settle", "settler", "seven", "seventy", "sever",
    "severe", "sew", "sewage", "sewer", "sewing", "sex", "sexual", "shabby",
    "shack", "shackle", "shade", "shadow", "shady", "shaft", "shaggy", "shake",
    "shaken", "shaky", "shall", "shallow", "sham", "shame", "shampoo", "shanty",
    "shape", "shapely", "share", "shark", "sharp", "sharpen", "sharply", "shatter",
    "shave", "shaver", "shawl", "she", "sheaf", "shear", "sheath", "sheathe",
    "sheaves", "shed", "sheen", "sheep", "sheer", "sheet", "shelf", "shell",
    "shelter", "shelve", "shelves", "sherbet", "sheriff", "sherry", "shield", "shift",
    "shifty", "shimmer", "shin", "shine", "shingle", "shiny", "ship", "shirk",
    "shirt", "shiver", "shoal", "shock", "shod", "shoddy", "shoe", "shone",
    "shoo", "shook", "shoot", "shop", "shopper", "shore", "short", "shorten",
    "shot", "shotgun", "should", "shout", "shove", "shovel", "show", "shower",
    "showman", "shown", "showy", "shrank", "shred", "shrew", "shrewd", "shriek",
    "shrill", "shrimp", "shrine", "shrink", "shrivel", "shroud", "shrub", "shrug",
    "shuck", "shudder", "shuffle", "shun", "shunt", "shut", "shutter", "shuttle",
    "shy", "shyness", "sibling", "sic", "sick", "sicken", "sickle", "sickly",
    "side", "siding", "sidle", "siege", "siesta", "sieve", "sift", "sigh",
    "sight", "sign", "signal", "signify", "silence", "silent", "silicon", "silk",
    "silken", "sill", "silly", "silo", "silt", "silver", "silvery", "simile",
    "simmer", "simple", "simply", "sin", "since", "sincere", "sinew", "sinewy",
    "sinful", "sing", "singe", "singer", "single", "singly", "sink", "sinner",
    "sinus", "sip", "siphon", "sir", "sire", "siren", "sirloin", "sissy",
    "sister", "sit", "site", "sitter", "six", "sixteen", "sixth", "sixty",
    "sizable", "size", "sizzle", "skate", "skater", "skein", "skeptic", "sketch",
    "sketchy", "skew", "skewer", "ski", "skid", "skill", "skillet", "skim",
    "skimp", "skimpy", "skin", "skinny", "skip", "skipper", "skirt", "skit",
    "skulk", "skull", "skunk", "sky", "skyline", "slab", "slack", "slacken",
    "slain", "slake", "slam", "slander", "slang", "slant", "slap", "slash",
    "slat", "slate", "slave", "slavish", "slay", "sleazy", "sled", "sleek",
    "sleep", "sleeper", "sleepy", "sleet", "sleeve", "sleigh", "slender", "slept",
    "slew", "slice", "slick", "slid", "slide", "slight", "slim", "slime",
    "slimy", "sling", "slink", "slip", "slit", "slither", "sliver", "slob",
    "slobber", "slog", "slogan", "slop", "slope", "sloppy", "slosh", "slot",
    "sloth", "slouch", "slow", "slowly", "sludge", "slug", "sluice", "slum",
    "slumber", "slump", "slung", "slunk", "slur", "slush", "slut", "sly",
    "slyness", "smack", "small", "smart", "smartly", "smash", "smear", "smell",
    "smelly", "smelt", "smidgen", "smile", "smirk", "smith", "smitten", "smock",
    "smog", "smoke", "smoker", "smoky", "smolder", "smooth", "smother", "smudge",
    "smug", "smuggle", "smugly", "smut", "snack", "snag", "snail", "snake",
    "snap", "snappy", "snare", "snarl", "snatch", "sneak", "sneaker", "sneaky",
    "sneer", "sneeze", "snicker", "snide", "sniff", "sniffle", "snip", "snipe",
    "sniper", "snitch", "snob", "snoop", "snooty", "snooze", "snore", "snorkel",
    "snort", "snot", "snout", "snow", "snowy", "snub", "snuff", "snug",
    "snuggle", "snugly", "so", "soak", "soap", "soapy", "soar", "sob",
    "sober", "soccer", "social", "society", "sock", "socket", "sod", "soda",
    "sodden", "sodium", "sofa", "soft", "soften", "softly", "soggy", "soil",
    "sojourn", "solace", "solar", "sold", "solder", "soldier", "sole", "solely",
    "solemn", "solicit", "solid", "solidly", "solo", "soluble", "solve", "solvent",
    "somber", "some", "someday", "someone", "son", "sonata", "song", "sonic",
    "sonnet", "soon", "soot", "soothe", "sooty", "sop", "soprano", "sorcery",
    "sordid", "sore", "sorely", "sorrow", "sorry", "sort", "souffle", "sought",
    "soul", "sound", "soundly", "soup", "sour", "source", "south", "sow",
    "sown", "spa", "space", "spade", "span", "spangle", "spaniel", "spank",
    "spar", "spare", "spark", "sparkle", "sparrow", "sparse", "spasm", "spat",
    "spatial", "spatter", "spatula", "spawn", "spay", "speak", "spear", "special",
    "species", "specify", "speck", "sped", "speech", "speed", "speedy", "spell",
    "spend", "spent", "sperm", "spew", "sphere", "sphinx", "spice", "spicy",
    "spider", "spike", "spill", "spin", "spinal", "spindly", "spine", "spiral",
    "spire", "spirit", "spit", "spite", "spittle", "splash", "spleen", "splice",
    "splint", "split", "splurge", "spoil", "spoke", "spoken", "sponge", "spongy",
    "sponsor", "spoof", "spook", "spooky", "spool", "spoon", "sport", "spot",
    "spotty", "spouse", "spout", "sprain", "sprang", "sprawl", "spray", "spread",
    "spree", "sprig", "spring", "springy", "sprint", "sprout", "spruce", "sprung",
    "spry", "spud", "spun", "spunk", "spur", "spurn", "spurt", "sputter",
    "spy", "squad", "squalid", "squall", "squalor", "square", "squash", "squat",
    "squawk", "squeak", "squeaky", "squeal", "squeeze", "squelch", "squid", "squint",
    "squire", "squirm", "squirt", "stab", "stable", "stack", "staff", "stag",
    "stage", "stagger", "staid", "stain", "stair", "stake", "stale", "stalk",
    "stall", "stamina", "stammer", "stamp", "stance", "stand", "standby", "stank",
    "stanza", "staple", "stapler", "star", "starch", "starchy", "stare", "stark",
    "starry", "start", "starter", "startle", "starve", "state", "stately", "static",
    "station", "statue", "stature", "status", "statute", "staunch", "stave", "stay",
    "steady", "steak", "steal", "stealth", "steam", "steamy", "steel", "steep",
    "steeple", "steer", "stellar", "stem", "stench", "step", "stereo", "sterile",
    "stern", "sternly", "stew", "stick", "sticky", "stiff", "stiffen", "stiffly",
    "stifle", "stigma", "still", "stilted", "stimuli", "sting", "stinger", "stingy",
    "stink", "stint", "stir", "stirrup", "stitch", "stock", "stocky", "stodgy",
    "stoke", "stole", "stolen", "stolid", "stomp", "stone", "stony", "stood",
    "stool", "stoop", "stop", "stopper", "storage", "store", "stork", "storm",
    "stormy", "story", "stout", "stove", "stow", "strain", "strait", "strand",
    "strange", "strap", "strata", "stratum", "straw", "stray", "streak", "stream",
    "street", "stress", "stretch", "strew", "strict", "stride", "strife", "strike",
    "striker", "string", "strip", "stripe", "strive", "striven", "strode", "stroke",
    "stroll", "strong", "strove", "struck", "strum", "strung", "strut", "stub",
    "stubble", "stubby", "stuck", "stud", "student", "studio", "study", "stuff",
    "stuffy", "stumble", "stump", "stun", "stung", "stunk", "stunt", "stupefy",
    "stupid", "stupor", "sturdy", "stutter", "style", "stylish", "suave", "sub",
    "subdue", "subject", "sublet", "sublime", "submit", "subsidy", "subsist", "subtle",
    "subtly", "suburb", "subvert", "subway", "succeed", "success", "succor", "succumb",
    "such", "suck", "sucker", "suckle", "suction", "sudden", "suds", "sue",
    "suede", "suffer", "suffice", "suffix", "sugar", "sugary", "suggest", "suicide",
    "suit", "suite", "suitor", "sulfur", "sulk", "sulky", "sullen", "sultan",
    "sultry", "sum", "summary", "summer", "summit", "summon", "summons", "sun",
    "sunburn", "sundae", "sundial", "sundown", "sundry", "sung", "sunk", "sunken",
    "sunlit", "sunny", "sunrise", "sunset", "suntan", "sunup", "super", "superb",
    "supper", "supple", "supply", "suppose", "supreme", "sure", "surely", "surf",
    "surface", "surfing", "surge", "surgery", "surly", "surmise", "surpass", "surplus",
    "survey", "survive", "suspend", "sustain", "swab", "swagger", "swallow", "swam",
    "swamp", "swampy", "swan", "swap", "swarm", "swarthy", "swat", "sway",
    "swear", "sweat", "sweater", "sweep", "sweeper", "sweet", "sweeten", "sweetly",
    "swell", "swept", "swerve", "swift", "swiftly", "swig", "swill", "swim",
    "swindle", "swine", "swing", "swipe", "swirl", "swish", "switch", "swivel",
    "swollen", "swoon", "swoop", "sword", "swore", "sworn", "swum", "swung",
    "symbol", "symptom", "synonym", "syntax", "syringe", "syrup", "system", "tab",
    "tabby", "table", "tablet", "tabloid", "taboo", "tacit", "tacitly", "tack",
    "tackle", "tacky", "taco", "tact", "tactful", "tadpole", "tag", "tail",
    "tailor", "taint", "take", "taken", "takeoff", "talc", "tale", "talent",
    "talk", "talker", "tall", "tallow", "tally", "talon", "tame", "tamely",
    "tamper", "tan", "tandem", "tang", "tangent", "tangle", "tango", "tank",
    "tankard", "tanker", "tantrum", "tap", "tape", "taper", "taps", "tar",
    "tardy", "target", "tariff", "tarnish", "tarry", "tart", "tartan", "tartar",
    "task", "tassel", "taste", "tasty", "tattle", "tattoo", "taught", "taunt",
    "taut", "tavern", "tawdry", "tawny", "tax", "taxable", "taxi", "tea",
    "teach", "teacher", "teacup", "teak", "team", "teapot", "tear", "tearful",
    "tease", "teat", "tedious", "tedium", "tee", "teem", "teenage", "teeter",
    "teeth", "teethe", "tell", "teller", "telling", "temper", "tempest", "temple",
    "tempo", "tempt", "ten", "tenancy", "tenant", "tend", "tender", "tendon",
    "tendril", "tenet", "tennis", "tenor", "tense", "tent", "tenth", "tenuous",
    "tenure", "tepee", "tepid", "term", "terrace", "terrain", "terrier", "terrify",
    "terror", "terse", "tersely", "test", "testes", "testify", "tetanus", "tether",
    "text", "textile", "texture", "than", "thank", "that", "thatch", "thaw",
    "the", "theater", "theft", "their", "theirs", "them", "theme", "then",
    "theory", "therapy", "there", "thereby", "therein", "thereof", "thermal", "these",
    "thesis", "they", "thick", "thicken", "thicket", "thickly", "thief", "thigh",
    "thimble", "thin", "thing", "think", "thinly", "third", "thirst", "thirsty",
    "thirty", "this", "thistle", "thong", "thorn", "thorny", "those", "though",
    "thought", "thrash", "thread", "threat", "three", "thresh", "threw", "thrift",
    "thrifty", "thrill", "thrive", "throat", "throb", "throne", "throng", "through",
    "throw", "thrown", "thrust", "thud", "thug", "thumb", "thump", "thus",
    "thwart", "thyme", "tiara", "tick", "ticket", "tickle", "tidal", "tidbit",
    "tide", "tidy", "tie", "tier", "tiff", "tiger", "tight", "tighten",
    "tightly", "tights", "tile", "till", "tilt", "timber", "time", "timely",
    "timer", "timid", "timidly", "tin", "tinder", "tinge", "tingle", "tinker",
    "tinkle", "tinny", "tinsel", "tint", "tiny", "tip", "tipsy", "tiptoe",
    "tirade", "tire", "tired", "tissue", "tit", "title", "titter", "to",
    "toad", "toast", "toaster", "tobacco", "today", "toddle", "toddler", "toe",
    "toenail", "toffee", "toga", "toil", "toilet", "token", "told", "toll",
    "tomato", "tomb", "tomboy", "tomcat", "tome", "ton", "tone", "tongs",
    "tongue", "tonic", "tonight", "tonnage", "tonsil", "too", "took", "tool",
    "toot", "tooth", "top", "topaz", "topic", "topical", "topple", "torch",
    "tore", "torment", "torn", "tornado", "torpedo", "torrid", "torso", "torture",
    "toss", "tot", "total", "totally", "tote", "totem", "totter", "toucan",
    "touch", "touchy", "tough", "toughen", "toupee", "tour", "tourist", "tousle",
    "tow", "toward", "towel", "tower", "town", "toxic", "toxin", "toy",
    "trace", "track", "tract", "tractor", "trade", "trader", "traffic", "tragedy",
    "tragic", "trail", "trailer", "train", "trainee", "trainer", "trait", "traitor",
    "tramp", "trample", "trance", "transit", "trap", "trapeze", "trapper", "trash",
    "trashy", "trauma", "travel", "trawl", "trawler", "tray", "tread", "treason",
    "treat", "treaty", "treble", "tree", "trek", "trellis", "tremble", "tremor",
    "trench", "trend", "trendy", "trestle", "trial", "tribal", "tribe", "tribute",
    "trick", "trickle", "tricky", "tried", "trifle", "trigger", "trill", "trilogy",
    "trim", "trinket", "trio", "trip", "tripe", "triple", "triplet", "tripod",
    "trite", "trivial", "trod", "trodden", "troll", "trolley", "troop", "trooper",
    "trophy", "trot", "trouble", "trough", "trounce", "troupe", "trout", "trowel",
    "truancy", "truant", "truce", "truck", "trudge", "true", "truffle", "truism",
    "truly", "trump", "trumpet", "trunk", "trust", "trustee", "trusty", "truth",
    "try", "trying", "tryout", "tub", "tuba", "tube", "tubing", "tubular",
    "tuck", "tuft", "tug", "tulip", "tumble", "tumbler", "tummy", "tumor",
    "tumult", "tuna", "tundra", "tune", "tuner", "tunic", "tunnel", "turban",
    "turbine", "tureen", "turf", "turkey", "turmoil", "turn", "turnip", "turnout",
    "turret", "turtle", "tusk", "tussle", "tutor", "tuxedo", "twang", "tweak",
    "tweed", "tweet", "twelfth", "twelve", "twenty", "twice", "twig", "twin",
    "twine", "twinge", "twinkle", "twirl", "twist", "twister", "twitch", "twitter",
    "two", "tycoon", "tying", "type", "typhoid", "typhus", "typical", "typify",
    "typist", "tyranny", "tyrant", "udder", "ugh", "ugly", "ulcer", "umpire",
    "unable", "unaware", "unborn", "uncanny", "uncle", "unclean", "uncouth", "uncover",
    "under", "undergo", "undid", "undo", "undoing", "undone", "undress", "undue",
    "unduly", "undying", "unearth", "uneasy", "unequal", "uneven", "unfair", "unfit",
    "unfold", "unfurl", "ungodly", "unhappy", "unhook", "unicorn", "uniform", "unify",
    "union", "unique", "unison", "unit", "unite", "unity", "unjust", "unkempt",
    "unkind", "unknown", "unleash", "unless", "unlike", "unload", "unlock", "unlucky",
    "unmask", "unnerve", "unpack", "unravel", "unreal", "unrest", "unruly", "unsafe",
    "unsaid", "unseat", "unsound", "unsung", "untidy", "untie", "until", "untold",
    "untrue", "unused", "unusual", "unveil", "unwind", "unwise", "unwrap", "up",
    "upbeat", "update", "upend", "upgrade", "upheld", "uphill", "uphold", "upkeep",
    "uplift", "upon", "upper", "upright", "uproar", "uproot", "upset", "upshot",
    "upstart", "uptight", "uptown", "upturn", "upward", "uranium", "urban", "urbane",
    "urchin", "urge", "urgency", "urgent", "urinate", "urine", "urn", "us",
    "usage", "use", "used", "useful", "useless", "user", "usher", "usual",
    "usually", "usurp", "uterus", "utility", "utilize", "utmost", "utter", "utterly",
    "vacancy", "vacant", "vacate", "vaccine", "vacuum", "vagina", "vaginal", "vagrant",
    "vague", "vaguely", "vain", "valet", "valiant", "valid", "valise", "valley",
    "valor", "value", "valve", "vampire", "van", "vandal", "vane", "vanilla",
    "vanish", "vanity", "vapor", "variant", "varied", "variety", "various", "varnish",
    "varsity", "vary", "vase", "vast", "vastly", "vat", "vault", "veal",
    "veer", "vehicle", "veil", "vein", "velour", "velvet", "velvety", "veneer",
    "venison", "venom", "vent", "venture", "veranda", "verb", "verbal", "verbose",
    "verdict", "verge", "verify", "vermin", "verse", "version", "versus", "vertigo",
    "verve", "very", "vessel", "vest", "vestige", "vet", "veteran", "veto",
    "vex", "via", "viable", "viaduct", "vial", "vibrant", "vibrate", "vicar",
    "vice", "vicious", "victim", "victor", "victory", "video", "vie", "view",
    "viewer", "vigil", "vigor", "vile", "vilify", "villa", "village", "villain",
    "vine", "vinegar", "vintage", "vinyl", "viola", "violate", "violent", "violet",
    "violin", "viper", "virgin", "virile", "virtual", "virtue", "virus", "visa",
    "vise", "visible", "visibly", "vision", "visit", "visitor", "visor", "vista",
    "visual", "vital", "vitally", "vitamin", "vivid", "vocal", "vodka", "vogue",
    "voice", "void", "volcano", "volley", "volt", "voltage", "volume", "vomit",
    "voodoo", "vortex", "vote", "voter", "vouch", "voucher", "vow", "vowel",
    "voyage", "voyager", "vulgar", "vulture", "wad", "waddle", "wade", "wafer",
    "waffle", "waft", "wag", "wage", "wager", "wagon", "waif", "wail",
    "waist", "wait", "waiter", "waive", "waiver", "wake", "waken", "walk",
    "walker", "wall", "wallet", "wallop", "wallow", "walnut", "walrus", "waltz",
    "wan", "wand", "wander", "wane", "want", "wanton", "war", "warble",
    "ward", "warden", "warfare", "warhead", "warlike", "warm", "warmly", "warmth",
    "warn", "warning", "warp", "warpath", "warren", "warrior", "wart", "wary",
    "was", "wash", "washer", "washing", "wasp", "waste", "watch", "water",
    "watery", "watt", "wave", "waver", "wavy", "wax", "waxy", "way",
    "waylay", "wayside", "wayward", "we", "weak", "weaken", "weakly", "wealth",
    "wealthy", "wean", "weapon", "wear", "wearily", "weary", "weasel", "weather",
    "weave", "weaver", "web", "wed", "wedding", "wedge", "wedlock", "wee",
    "weed", "weedy", "week", "weekly", "weep", "weigh", "weight", "weighty",
    "weird", "weirdo", "welcome", "weld", "welder", "welfare", "well", "welt",
    "welter", "went", "wept", "were", "west", "western", "wet", "whack",
    "whale", "whaler", "wharf", "what", "wheat", "wheel", "wheeze", "when",
    "where", "whereas", "whereby", "wherein", "whet", "whether", "which", "whiff",
    "while", "whim", "whimper", "whine", "whinny", "whip", "whir", "whirl",
    "whisk", "whisker", "whisper", "whistle", "white", "whiten", "whiz", "who",
    "whoa", "whoever", "whole", "wholly", "whom", "whoop", "whopper", "whore",
    "whose", "why", "wick", "wicked", "wicker", "wide", "widely", "widen",
    "widow", "widower", "width", "wield", "wife", "wig", "wiggle", "wigwam",
    "wild", "wildcat", "wildly", "will", "willful", "willing", "willow", "wilt",
    "wily", "win", "wince", "winch", "wind", "window", "windy", "wine",
    "wing", "winged", "wink", "winner", "winning", "winter", "wipe", "wiper",
    "wire", "wiring", "wiry", "wisdom", "wise", "wisely", "wish", "wisp",
    "wispy", "wistful", "wit", "witch", "with", "wither", "within", "without",
    "witness", "witty", "wives", "wizard", "wobble", "wobbly", "woe", "wok",
    "wolf", "wolves", "woman", "womb", "women", "won", "wonder", "wont",
    "woo", "wood", "wooded", "wooden", "woody", "woof", "wool", "woolen",
    "woolly", "word", "wording", "wordy", "wore", "work", "worker", "workman",
    "world", "worldly", "worm", "worn", "worry", "worse", "worsen", "worship",
    "worst", "worth", "worthy", "would", "wound", "wove", "woven", "wow",
    "wrangle", "wrap", "wrapper", "wrath", "wreak", "wreath", "wreathe", "wreck",
    "wren", "wrench", "wrest", "wrestle", "wretch", "wriggle", "wring", "wringer",
    "wrinkle", "wrist", "writ", "write", "writer", "writhe", "writing", "written",
    "wrong", "wrongly", "wrote", "wrought", "wrung", "wry", "yacht", "yak",
    "yam", "yank", "yap", "yard", "yarn", "yawn", "year", "yearly",
    "yearn", "yeast", "yell", "yellow", "yelp", "yen", "yes", "yet",
    "yew", "yield", "yodel", "yoga", "yogurt", "yoke", "yokel", "yolk",
    "yonder", "you", "young", "your", "yours", "youth", "yowl", "zany",
    "zeal", "zealous", "zebra", "zenith", "zero", "zest", "zigzag", "zinc",
    "zip", "zipper", "zodiac", "zombie", "zone", "zoo", "zoology", "zoom",
)
