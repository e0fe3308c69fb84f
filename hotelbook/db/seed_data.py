"""Static name lists the seed script draws from."""

DESCRIPTORS = [
    "Forest",
    "Ancient",
    "Petrified",
    "Roaring",
    "Cascade",
    "Tumbling",
    "Silent",
    "Redwood",
    "Bullfrog",
    "Maple",
    "Misty",
    "Elk",
    "Grizzly",
    "Ocean",
    "Sea",
    "Sky",
    "Dusty",
    "Diamond",
]

PLACES = [
    "Flats",
    "Village",
    "Canyon",
    "Pond",
    "Group Camp",
    "Horse Camp",
    "Ghost Town",
    "Camp",
    "Dispersed Camp",
    "Backcountry",
    "River",
    "Creek",
    "Creekside",
    "Bay",
    "Spring",
    "Bayshore",
    "Sands",
    "Mule Camp",
    "Hunting Camp",
    "Cliffs",
    "Hollow",
]

# (city, state)
CITIES = [
    ("New York", "New York"),
    ("Los Angeles", "California"),
    ("Chicago", "Illinois"),
    ("Houston", "Texas"),
    ("Philadelphia", "Pennsylvania"),
    ("Phoenix", "Arizona"),
    ("San Antonio", "Texas"),
    ("San Diego", "California"),
    ("Dallas", "Texas"),
    ("San Jose", "California"),
    ("Austin", "Texas"),
    ("Indianapolis", "Indiana"),
    ("Jacksonville", "Florida"),
    ("San Francisco", "California"),
    ("Columbus", "Ohio"),
    ("Charlotte", "North Carolina"),
    ("Fort Worth", "Texas"),
    ("Detroit", "Michigan"),
    ("El Paso", "Texas"),
    ("Memphis", "Tennessee"),
    ("Seattle", "Washington"),
    ("Denver", "Colorado"),
    ("Washington", "District of Columbia"),
    ("Boston", "Massachusetts"),
    ("Nashville", "Tennessee"),
    ("Baltimore", "Maryland"),
    ("Oklahoma City", "Oklahoma"),
    ("Louisville", "Kentucky"),
    ("Portland", "Oregon"),
    ("Las Vegas", "Nevada"),
    ("Milwaukee", "Wisconsin"),
    ("Albuquerque", "New Mexico"),
    ("Tucson", "Arizona"),
    ("Fresno", "California"),
    ("Sacramento", "California"),
    ("Long Beach", "California"),
    ("Kansas City", "Missouri"),
    ("Mesa", "Arizona"),
    ("Virginia Beach", "Virginia"),
    ("Atlanta", "Georgia"),
    ("Colorado Springs", "Colorado"),
    ("Raleigh", "North Carolina"),
    ("Omaha", "Nebraska"),
    ("Miami", "Florida"),
    ("Oakland", "California"),
    ("Tulsa", "Oklahoma"),
    ("Minneapolis", "Minnesota"),
    ("Cleveland", "Ohio"),
    ("Wichita", "Kansas"),
    ("New Orleans", "Louisiana"),
]

DESCRIPTION = (
    "Lorem ipsum dolor, sit amet consectetur adipisicing elit. Veritatis, ipsam "
    "quas aperiam aliquid dolor exercitationem, sed harum vero facilis quae magnam "
    "quidem tenetur aspernatur! Quaerat laudantium autem nostrum. Consectetur, officia!"
)
