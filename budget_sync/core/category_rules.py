"""
Category keyword rules for CSV import suggestions.

Each rule: (vendor pattern, category keyword, group keyword). Patterns are
matched against the preprocessed (lowercased) vendor string. High-confidence
rules name specific brands; medium-confidence rules are generic keywords that
may catch unintended vendors. Within a tier, the first rule that matches wins.

Category keywords are canonical names, resolved against the user's own
categories at import time, so no category ids live here.
"""
from typing import Tuple

Rule = Tuple[str, str, str]

FOOD = 'Food'
GOING_OUT = 'Going Out & Lifestyle'
NEEDS = 'Needs'
WANTS = 'Wants'
BUSINESS = 'Business'
SAVINGS = 'Savings'

HIGH_CONFIDENCE_RULES: Tuple[Rule, ...] = (
    # Groceries
    (r'\btesco\b', 'Groceries', FOOD),
    (r'\bsainsbury', 'Groceries', FOOD),
    (r'\basda\b', 'Groceries', FOOD),
    (r'\bmorrisons\b', 'Groceries', FOOD),
    (r'\bwaitrose\b', 'Groceries', FOOD),
    (r'\bmarks.*spencer|m&s food|ms food\b', 'Groceries', FOOD),
    (r'\bco.?op\b', 'Groceries', FOOD),
    (r'\baldi\b', 'Groceries', FOOD),
    (r'\blidl\b', 'Groceries', FOOD),
    (r'\bicelan(d|ics)\b', 'Groceries', FOOD),
    (r'\bwhole foods\b', 'Groceries', FOOD),
    (r'\btrader joe', 'Groceries', FOOD),
    (r'\bkroger\b', 'Groceries', FOOD),
    (r'\bpublix\b', 'Groceries', FOOD),
    (r'\bwegman', 'Groceries', FOOD),
    (r'\bcostco\b', 'Groceries', FOOD),
    (r'\bsam.?s club\b', 'Groceries', FOOD),
    (r'\bwal.?mart\b', 'Groceries', FOOD),
    (r'\bspar\b', 'Groceries', FOOD),
    (r'\bnetto\b', 'Groceries', FOOD),
    (r'\bbiedronka\b', 'Groceries', FOOD),
    (r'\bcarrefour\b', 'Groceries', FOOD),
    (r'\bledermacher\b', 'Groceries', FOOD),
    (r'\bfarm foods\b', 'Groceries', FOOD),
    (r'\bocado\b', 'Groceries', FOOD),

    # Dining out
    (r'\bmcdonald', 'Dining Out', GOING_OUT),
    (r'\bkfc\b', 'Dining Out', GOING_OUT),
    (r'\bburger king\b', 'Dining Out', GOING_OUT),
    (r'\bsubway\b', 'Lunch & Drinks', GOING_OUT),
    (r'\bpizza hut\b', 'Dining Out', GOING_OUT),
    (r'\bdomino.?s\b', 'Dining Out', GOING_OUT),
    (r'\bnando.?s\b', 'Dining Out', GOING_OUT),
    (r'\bgreggs\b', 'Lunch & Drinks', GOING_OUT),
    (r'\bpret a manger|\bpret\b', 'Lunch & Drinks', GOING_OUT),
    (r'\bwetherspoon', 'Lunch & Drinks', GOING_OUT),
    (r'\bjust.?eat\b', 'Dining Out', GOING_OUT),
    (r'\buber eats\b', 'Dining Out', GOING_OUT),
    (r'\bdeliveroo\b', 'Dining Out', GOING_OUT),
    (r'\bdoor.?dash\b', 'Dining Out', GOING_OUT),
    (r'\bgrubhub\b', 'Dining Out', GOING_OUT),
    (r'\bchipotle\b', 'Lunch & Drinks', GOING_OUT),
    (r'\bstarbucks\b', 'Lunch & Drinks', GOING_OUT),
    (r'\bcosta\b', 'Lunch & Drinks', GOING_OUT),
    (r'\bcaffe nero\b|\bnero\b', 'Lunch & Drinks', GOING_OUT),
    (r'\bwagamama\b', 'Dining Out', GOING_OUT),
    (r'\bpizza ?express\b', 'Dining Out', GOING_OUT),
    (r'\boliver.?s\b', 'Dining Out', GOING_OUT),
    (r'\btim hortons\b', 'Lunch & Drinks', GOING_OUT),
    (r'\bpanera\b', 'Lunch & Drinks', GOING_OUT),
    (r'\bfive guys\b', 'Dining Out', GOING_OUT),
    (r'\bshake shack\b', 'Dining Out', GOING_OUT),

    # Transport
    (r'\btfl\b|transport for london', 'Transport', NEEDS),
    (r'\boyster\b', 'Transport', NEEDS),
    (r'\bnational rail\b', 'Transport', NEEDS),
    (r'\btrainline\b', 'Transport', NEEDS),
    (r'\bavanti\b', 'Transport', NEEDS),
    (r'\bgwr\b|great western\b', 'Transport', NEEDS),
    (r'\bthameslink\b', 'Transport', NEEDS),
    (r'\bcrossrail\b', 'Transport', NEEDS),
    (r'\bnational express\b', 'Transport', NEEDS),
    (r'\bmegabus\b', 'Transport', NEEDS),
    (r'\buber\b', 'Transport', NEEDS),
    (r'\blyft\b', 'Transport', NEEDS),
    (r'\bbolt\b', 'Transport', NEEDS),
    (r'\bfreebird\b', 'Transport', NEEDS),
    (r'\bflixbus\b', 'Transport', NEEDS),
    (r'\beasyjet\b', 'Transport', NEEDS),
    (r'\bryanair\b', 'Transport', NEEDS),
    (r'\bba\b|british airways\b', 'Transport', NEEDS),
    (r'\bdelta\b', 'Transport', NEEDS),
    (r'\bamerica(n)? airlines\b', 'Transport', NEEDS),
    (r'\bunited airlines\b', 'Transport', NEEDS),
    (r'\beuro.?car parks|\bncp\b', 'Transport', NEEDS),

    # Fuel
    (r'\bbp\b|british petrol', 'Transport', NEEDS),
    (r'\bshell\b', 'Transport', NEEDS),
    (r'\besso\b', 'Transport', NEEDS),
    (r'\btexaco\b', 'Transport', NEEDS),
    (r'\bmobil\b', 'Transport', NEEDS),
    (r'\bjet petrol\b', 'Transport', NEEDS),
    (r'\bsainsbury.?s petrol\b', 'Transport', NEEDS),
    (r'\btesco petrol\b', 'Transport', NEEDS),
    (r'\bwm morrison petrol\b', 'Transport', NEEDS),

    # Subscriptions
    (r'\bnetflix\b', 'Subscriptions', WANTS),
    (r'\bspotify\b', 'Subscriptions', WANTS),
    (r'\bdisney\+|disney plus\b', 'Subscriptions', WANTS),
    (r'\bamazon prime\b', 'Subscriptions', WANTS),
    (r'\bapple (music|tv|one|arcade|icloud|storage)\b', 'Subscriptions', WANTS),
    (r'\bgoogle (one|storage|play pass)\b', 'Subscriptions', WANTS),
    (r'\byoutube premium\b', 'Subscriptions', WANTS),
    (r'\bhbo\b', 'Subscriptions', WANTS),
    (r'\bparamount\+|paramount plus\b', 'Subscriptions', WANTS),
    (r'\bprime video\b', 'Subscriptions', WANTS),
    (r'\bdeezer\b', 'Subscriptions', WANTS),
    (r'\btidal\b', 'Subscriptions', WANTS),
    (r'\btwitch\b', 'Subscriptions', WANTS),
    (r'\bdropbox\b', 'Subscriptions', WANTS),
    (r'\bnotion\b', 'Subscriptions', WANTS),
    (r'\bslack\b', 'Subscriptions', WANTS),
    (r'\badobe\b', 'Subscriptions', WANTS),
    (r'\bmicrosoft 365|office 365\b', 'Subscriptions', WANTS),

    # Software
    (r'\bcheckout\.com\b', 'Software', BUSINESS),
    (r'\baws\b|amazon web services', 'Software', BUSINESS),
    (r'\bgoogle cloud\b', 'Software', BUSINESS),
    (r'\bvercel\b', 'Software', BUSINESS),
    (r'\bgithub\b', 'Software', BUSINESS),
    (r'\bdigital.?ocean\b', 'Software', BUSINESS),

    # Bills
    (r'\bbritish gas\b', 'Bills', NEEDS),
    (r'\be.?on\b', 'Bills', NEEDS),
    (r'\boctopus energy\b', 'Bills', NEEDS),
    (r'\bbulb\b', 'Bills', NEEDS),
    (r'\bsso energy\b', 'Bills', NEEDS),
    (r'\bscottish power\b', 'Bills', NEEDS),
    (r'\bnpower\b', 'Bills', NEEDS),
    (r'\bev.?onik\b', 'Bills', NEEDS),
    (r'\bthames water\b', 'Bills', NEEDS),
    (r'\bsevern trent\b', 'Bills', NEEDS),
    (r'\bwater (bill|services|plus)\b', 'Bills', NEEDS),
    (r'\bconedison|\bcon ed\b', 'Bills', NEEDS),
    (r'\bpg&e|pacific gas\b', 'Bills', NEEDS),
    (r'\bbt\b|british telecom', 'Bills', NEEDS),
    (r'\bvirgin media\b', 'Bills', NEEDS),
    (r'\bsky\b', 'Bills', NEEDS),
    (r'\btalktalk\b', 'Bills', NEEDS),
    (r'\bvoda(fone)?\b', 'Bills', NEEDS),
    (r'\bthree\b', 'Bills', NEEDS),
    (r'\bo2\b', 'Bills', NEEDS),
    (r'\bee\b', 'Bills', NEEDS),
    (r'\bgiffgaff\b', 'Bills', NEEDS),
    (r'\bsmartphone|mobil(e )?contract\b', 'Bills', NEEDS),
    (r'\bcomcast\b', 'Bills', NEEDS),
    (r'\bxfinity\b', 'Bills', NEEDS),
    (r'\bverizon\b', 'Bills', NEEDS),
    (r'\bat&t\b', 'Bills', NEEDS),
    (r'\bt.?mobile\b', 'Bills', NEEDS),
    (r'\bsprint\b', 'Bills', NEEDS),

    # Health & gym
    (r'\bpure ?gym\b', 'Gym', WANTS),
    (r'\bplanet fitness\b', 'Gym', WANTS),
    (r'\bdavid lloyd\b', 'Gym', WANTS),
    (r'\bvirgin active\b', 'Gym', WANTS),
    (r'\bjd gyms?\b', 'Gym', WANTS),
    (r'\bthe gym\b', 'Gym', WANTS),
    (r'\banytime fitness\b', 'Gym', WANTS),
    (r'\b24 hour fitness\b', 'Gym', WANTS),
    (r'\bnhs prescriptions?\b', 'Health & Care', NEEDS),
    (r'\bboots pharmacy\b', 'Health & Care', NEEDS),
    (r'\blloyds pharmacy\b', 'Health & Care', NEEDS),
    (r'\bcvs\b', 'Health & Care', NEEDS),
    (r'\bwalgreens\b', 'Health & Care', NEEDS),
    (r'\brite aid\b', 'Health & Care', NEEDS),
    (r'\bboots\b', 'Health & Care', NEEDS),
    (r'\bsuperdrug\b', 'Health & Care', NEEDS),
    (r'\bulta\b', 'Health & Care', NEEDS),
    (r'\bsephora\b', 'Health & Care', NEEDS),
    (r'\bbarbershop|\bbarber\b', 'Health & Care', NEEDS),
    (r'\bsalon\b', 'Health & Care', NEEDS),

    # Shopping
    (r'\bamazon\b|\bamzn\b', 'Shopping', WANTS),
    (r'\bebay\b', 'Shopping', WANTS),
    (r'\basos\b', 'Shopping', WANTS),
    (r'\bnext\b', 'Shopping', WANTS),
    (r'\bprimark\b', 'Shopping', WANTS),
    (r'\bh&m\b', 'Shopping', WANTS),
    (r'\bzara\b', 'Shopping', WANTS),
    (r'\buniqlo\b', 'Shopping', WANTS),
    (r'\btk ?maxx\b', 'Shopping', WANTS),
    (r'\bnike\b', 'Shopping', WANTS),
    (r'\badidas\b', 'Shopping', WANTS),
    (r'\bjd sports\b', 'Shopping', WANTS),
    (r'\bfootlocker\b', 'Shopping', WANTS),
    (r'\briver island\b', 'Shopping', WANTS),
    (r'\btopshop\b', 'Shopping', WANTS),
    (r'\bboohoo\b', 'Shopping', WANTS),
    (r'\bprettylit(tle)?thing\b', 'Shopping', WANTS),
    (r'\bshein\b', 'Shopping', WANTS),
    (r'\bmacy.?s\b', 'Shopping', WANTS),

    # Entertainment
    (r'\bcineworld\b|\bodeon\b|\bvue cinema\b', 'Entertainment', GOING_OUT),
    (r'\bsteam\b', 'Entertainment', GOING_OUT),
    (r'\bepic games\b', 'Entertainment', GOING_OUT),
    (r'\bpsn\b|playstation network', 'Entertainment', GOING_OUT),
    (r'\bxbox\b|microsoft games', 'Entertainment', GOING_OUT),
    (r'\bnintendo\b', 'Entertainment', GOING_OUT),
    (r'\bticketmaster\b', 'Entertainment', GOING_OUT),
    (r'\bsee tickets\b', 'Entertainment', GOING_OUT),
    (r'\bsky ticket\b', 'Entertainment', GOING_OUT),

    # Savings & investments
    (r'\bvanguard\b', 'Investments', SAVINGS),
    (r'\bfidelity\b', 'Investments', SAVINGS),
    (r'\bfreetrade\b', 'Investments', SAVINGS),
    (r'\btrading ?212\b', 'Investments', SAVINGS),
    (r'\bnutmeg\b', 'Investments', SAVINGS),
    (r'\bmoneyfarm\b', 'Investments', SAVINGS),
    (r'\bcoin.?base\b', 'Investments', SAVINGS),
    (r'\bbinance\b', 'Investments', SAVINGS),
    (r'\bkraken\b', 'Investments', SAVINGS),
    (r'\betoro\b', 'Investments', SAVINGS),

    # Insurance
    (r'\bcompare the market\b', 'Insurance', NEEDS),
    (r'\bmoneysupermarket\b', 'Insurance', NEEDS),
    (r'\baviva\b', 'Insurance', NEEDS),
    (r'\baxa\b', 'Insurance', NEEDS),
    (r'\bdirect line\b', 'Insurance', NEEDS),
    (r'\badmiral\b', 'Insurance', NEEDS),
    (r'\bchurchill\b', 'Insurance', NEEDS),
    (r'\bgeico\b', 'Insurance', NEEDS),
    (r'\bstate farm\b', 'Insurance', NEEDS),
    (r'\ballstate\b', 'Insurance', NEEDS),

    # Charity
    (r'\bjust ?giving\b', 'Charity', WANTS),
    (r'\bgofundme\b', 'Charity', WANTS),
    (r'\bcharit(y|ies)\b', 'Charity', WANTS),
    (r'\bpatreon\b', 'Charity', WANTS),

    # Education
    (r'\bcoursera\b', 'Education', NEEDS),
    (r'\budemy\b', 'Education', NEEDS),
    (r'\bskillshare\b', 'Education', NEEDS),
    (r'\blinkedin learning\b', 'Education', NEEDS),
    (r'\bpluralsight\b', 'Education', NEEDS),

    # Home
    (r'\bb&q\b', 'Home', NEEDS),
    (r'\bwickes\b', 'Home', NEEDS),
    (r'\bhomebase\b', 'Home', NEEDS),
    (r'\bscrewfix\b', 'Home', NEEDS),
    (r'\btravis perkins\b', 'Home', NEEDS),
    (r'\bdunelm\b', 'Home', NEEDS),
    (r'\bikea\b', 'Home', NEEDS),
    (r'\bwayfair\b', 'Home', NEEDS),
    (r'\bhome depot\b', 'Home', NEEDS),
    (r'\blowe.?s\b', 'Home', NEEDS),
    (r'\bbeds online\b', 'Home', NEEDS),

    # Family
    (r'\bnursery\b', 'Family', NEEDS),
    (r'\bschool fees\b', 'Family', NEEDS),
    (r'\bclubhouse\b', 'Family', NEEDS),

    # Travel
    (r'\bairbnb\b', 'Travel', WANTS),
    (r'\bbooking\.com\b', 'Travel', WANTS),
    (r'\bexpedia\b', 'Travel', WANTS),
    (r'\btravelodge\b', 'Travel', WANTS),
    (r'\bpremier inn\b', 'Travel', WANTS),
    (r'\bholiday inn\b', 'Travel', WANTS),
    (r'\bhilton\b', 'Travel', WANTS),
    (r'\bmarriott\b', 'Travel', WANTS),
    (r'\bhyatt\b', 'Travel', WANTS),

    # Cash
    (r'\batm\b|cash machine\b|cashpoint\b', 'Cash', WANTS),
)

MEDIUM_CONFIDENCE_RULES: Tuple[Rule, ...] = (
    (r'grocery|grocer|supermark', 'Groceries', FOOD),
    (r'takeaway|takeout|delivery food', 'Dining Out', GOING_OUT),
    (r'restaurant|bistro|diner\b', 'Dining Out', GOING_OUT),
    (r'cafe|coffee|bakery|pastry', 'Lunch & Drinks', GOING_OUT),
    (r'petrol|fuel|gas station|filling station', 'Transport', NEEDS),
    (r'pharmacy|chemist|drug store', 'Health & Care', NEEDS),
    (r'gym|fitness|yoga|pilates|crossfit', 'Gym', WANTS),
    (r'streaming|subscription|membership', 'Subscriptions', WANTS),
    (r'electric|gas bill|energy bill|utilities', 'Bills', NEEDS),
    (r'broadband|internet|wifi', 'Bills', NEEDS),
    (r'mobile|phone bill|sim\b|contract phone', 'Bills', NEEDS),
    (r'clothing|fashion|apparel|clothes', 'Shopping', WANTS),
    (r'insurance|insurer|cover\b', 'Insurance', NEEDS),
    (r'\bpub\b|\bbar\b|club\b|nightclub|\bdrinks\b', 'Entertainment', GOING_OUT),
    (r'hotel|hostel|motel|resort\b', 'Travel', WANTS),
    (r'flight|airline|airport', 'Travel', WANTS),
    (r'train|rail|metro|underground|tram\b', 'Transport', NEEDS),
    (r'\bbus\b|\bcoach\b', 'Transport', NEEDS),
    (r'taxi|\bcab\b|rideshare', 'Transport', NEEDS),
    (r'parking\b|car park', 'Transport', NEEDS),
    (r'donation|charity|charities|fund\b', 'Charity', WANTS),
    (r'education|tuition|\bcourse\b|\btraining\b', 'Education', NEEDS),
    (r'\brent\b|letting\b|landlord', 'Housing', NEEDS),
    (r'mortgage\b', 'Housing', NEEDS),
    (r'council tax\b', 'Bills', NEEDS),
    (r'salon|hairdress|barber|haircut', 'Health & Care', NEEDS),
    (r'beauty\b|\bspa\b|\bnails?\b', 'Health & Care', NEEDS),
    (r'\bbooks?\b|stationery|paper\b', 'Shopping', WANTS),
    (r'hardware|\bdiy\b|\btools\b', 'Home', NEEDS),
    (r'\bvets?\b|\bpets?\b', 'Family', NEEDS),
    (r'nursery\b|\bschool\b|school fees', 'Family', NEEDS),
    (r'dentist|dental\b', 'Health & Care', NEEDS),
    (r'doctor|\bgp\b|medical\b|hospital\b', 'Health & Care', NEEDS),
    (r'invest|broker|shares|stocks|\bisa\b', 'Investments', SAVINGS),
    (r'savings', 'Savings', SAVINGS),
    (r'cinema|theatre|concert|show\b', 'Entertainment', GOING_OUT),
    (r'\bgame\b|\bgaming\b|esport', 'Entertainment', GOING_OUT),
    (r'\bsport\b|football|cricket|tennis', 'Entertainment', GOING_OUT),
    (r'\bchild|\bkids\b|\bbaby\b|toddler', 'Family', NEEDS),
    (r'software|saas|hosting|domain', 'Software', BUSINESS),
    (r'\btax\b|hmrc|\birs\b', 'Taxes', BUSINESS),
)
