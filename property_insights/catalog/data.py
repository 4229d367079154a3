"""Bundled Australian property dataset.

Rows are plain tuples so the table stays readable; ``PropertyCatalog.default``
turns them into models.
"""

# id, address, short address, suburb, state, postcode, type, beds, baths,
# parking, land m2, building m2, (low, mid, high), (weekly rent, yield %), (lat, lng)
PROPERTY_ROWS = [
    ("1", "123 Collins Street, Melbourne VIC 3000", "123 Collins Street", "Melbourne", "VIC", "3000", "House", 3, 2, 1, 450, 180, (850000, 950000, 1050000), (650, 3.6), (-37.8136, 144.9631)),
    ("6", "42 Chapel Street, South Yarra VIC 3141", "42 Chapel Street", "South Yarra", "VIC", "3141", "Apartment", 2, 1, 1, 0, 75, (620000, 680000, 740000), (520, 4.0), (-37.8387, 144.9920)),
    ("7", "88 Bridge Road, Richmond VIC 3121", "88 Bridge Road", "Richmond", "VIC", "3121", "Townhouse", 3, 2, 2, 320, 150, (980000, 1080000, 1180000), (720, 3.5), (-37.8183, 145.0000)),
    ("8", "15 Acland Street, St Kilda VIC 3182", "15 Acland Street", "St Kilda", "VIC", "3182", "Apartment", 1, 1, 0, 0, 55, (420000, 470000, 520000), (380, 4.2), (-37.8679, 144.9808)),
    ("9", "201 Lygon Street, Carlton VIC 3053", "201 Lygon Street", "Carlton", "VIC", "3053", "Apartment", 2, 1, 1, 0, 80, (550000, 610000, 670000), (480, 4.1), (-37.8003, 144.9669)),
    ("10", "34 High Street, Armadale VIC 3143", "34 High Street", "Armadale", "VIC", "3143", "House", 4, 3, 2, 650, 280, (2100000, 2350000, 2600000), (1200, 2.7), (-37.8556, 145.0194)),
    ("11", "67 Glenferrie Road, Hawthorn VIC 3122", "67 Glenferrie Road", "Hawthorn", "VIC", "3122", "House", 3, 2, 1, 420, 170, (1450000, 1600000, 1750000), (850, 2.8), (-37.8226, 145.0356)),
    ("2", "45 Harbour Drive, Sydney NSW 2000", "45 Harbour Drive", "Sydney", "NSW", "2000", "Apartment", 2, 1, 0, 0, 85, (720000, 780000, 840000), (580, 3.9), (-33.8688, 151.2093)),
    ("12", "156 Campbell Parade, Bondi Beach NSW 2026", "156 Campbell Parade", "Bondi Beach", "NSW", "2026", "Apartment", 3, 2, 1, 0, 120, (1850000, 2050000, 2250000), (1100, 2.8), (-33.8915, 151.2767)),
    ("13", "22 Church Street, Parramatta NSW 2150", "22 Church Street", "Parramatta", "NSW", "2150", "Apartment", 2, 2, 1, 0, 95, (580000, 640000, 700000), (520, 4.2), (-33.8151, 151.0011)),
    ("14", "89 The Corso, Manly NSW 2095", "89 The Corso", "Manly", "NSW", "2095", "Apartment", 2, 1, 1, 0, 80, (1250000, 1380000, 1510000), (780, 2.9), (-33.7969, 151.2875)),
    ("15", "33 King Street, Newtown NSW 2042", "33 King Street", "Newtown", "NSW", "2042", "Terrace", 3, 1, 0, 180, 110, (1350000, 1480000, 1610000), (850, 3.0), (-33.8971, 151.1793)),
    ("16", "412 Pacific Highway, Crows Nest NSW 2065", "412 Pacific Highway", "Crows Nest", "NSW", "2065", "Apartment", 2, 1, 1, 0, 72, (780000, 850000, 920000), (600, 3.7), (-33.8265, 151.2052)),
    ("17", "78 Hunter Street, Newcastle NSW 2300", "78 Hunter Street", "Newcastle", "NSW", "2300", "House", 3, 2, 2, 450, 165, (820000, 900000, 980000), (620, 3.6), (-32.9283, 151.7817)),
    ("18", "25 Crown Street, Wollongong NSW 2500", "25 Crown Street", "Wollongong", "NSW", "2500", "House", 4, 2, 2, 550, 200, (920000, 1020000, 1120000), (680, 3.5), (-34.4278, 150.8931)),
    ("3", "78 Queen Street, Brisbane QLD 4000", "78 Queen Street", "Brisbane", "QLD", "4000", "House", 4, 2, 2, 600, 220, (680000, 750000, 820000), (550, 3.8), (-27.4698, 153.0251)),
    ("19", "55 Grey Street, South Brisbane QLD 4101", "55 Grey Street", "South Brisbane", "QLD", "4101", "Apartment", 2, 2, 1, 0, 85, (520000, 580000, 640000), (480, 4.3), (-27.4810, 153.0182)),
    ("20", "112 Brunswick Street, Fortitude Valley QLD 4006", "112 Brunswick Street", "Fortitude Valley", "QLD", "4006", "Apartment", 1, 1, 1, 0, 55, (380000, 420000, 460000), (380, 4.7), (-27.4575, 153.0327)),
    ("21", "234 Cavill Avenue, Surfers Paradise QLD 4217", "234 Cavill Avenue", "Surfers Paradise", "QLD", "4217", "Apartment", 3, 2, 2, 0, 130, (850000, 950000, 1050000), (750, 4.1), (-28.0027, 153.4300)),
    ("22", "67 Hastings Street, Noosa Heads QLD 4567", "67 Hastings Street", "Noosa Heads", "QLD", "4567", "Apartment", 2, 2, 1, 0, 95, (1100000, 1250000, 1400000), (850, 3.5), (-26.3920, 153.0864)),
    ("23", "45 Ocean Street, Broadbeach QLD 4218", "45 Ocean Street", "Broadbeach", "QLD", "4218", "Apartment", 2, 2, 1, 0, 90, (680000, 750000, 820000), (580, 4.0), (-28.0312, 153.4311)),
    ("24", "189 Shute Harbour Road, Airlie Beach QLD 4802", "189 Shute Harbour Road", "Airlie Beach", "QLD", "4802", "House", 3, 2, 2, 520, 160, (580000, 650000, 720000), (550, 4.4), (-20.2697, 148.7186)),
    ("25", "88 Sheridan Street, Cairns QLD 4870", "88 Sheridan Street", "Cairns", "QLD", "4870", "House", 3, 2, 1, 400, 145, (420000, 480000, 540000), (420, 4.6), (-16.9186, 145.7781)),
    ("26", "156 Victoria Street, Townsville QLD 4810", "156 Victoria Street", "Townsville", "QLD", "4810", "House", 4, 2, 2, 650, 210, (380000, 430000, 480000), (400, 4.8), (-19.2590, 146.8169)),
    ("4", "12 King William Street, Adelaide SA 5000", "12 King William Street", "Adelaide", "SA", "5000", "House", 3, 2, 1, 500, 195, (520000, 580000, 640000), (420, 3.8), (-34.9285, 138.6007)),
    ("27", "78 Jetty Road, Glenelg SA 5045", "78 Jetty Road", "Glenelg", "SA", "5045", "Apartment", 2, 1, 1, 0, 75, (480000, 530000, 580000), (420, 4.1), (-34.9804, 138.5155)),
    ("28", "45 The Parade, Norwood SA 5067", "45 The Parade", "Norwood", "SA", "5067", "Townhouse", 3, 2, 2, 380, 165, (720000, 800000, 880000), (550, 3.6), (-34.9210, 138.6341)),
    ("5", "56 St Georges Terrace, Perth WA 6000", "56 St Georges Terrace", "Perth", "WA", "6000", "Apartment", 2, 1, 1, 0, 90, (480000, 520000, 560000), (400, 4.0), (-31.9505, 115.8605)),
    ("29", "123 Marine Terrace, Fremantle WA 6160", "123 Marine Terrace", "Fremantle", "WA", "6160", "Townhouse", 3, 2, 1, 280, 140, (720000, 800000, 880000), (580, 3.8), (-32.0569, 115.7485)),
    ("30", "88 Scarborough Beach Road, Scarborough WA 6019", "88 Scarborough Beach Road", "Scarborough", "WA", "6019", "Apartment", 2, 2, 2, 0, 95, (580000, 650000, 720000), (520, 4.2), (-31.8947, 115.7585)),
    ("31", "67 London Circuit, Canberra ACT 2601", "67 London Circuit", "Canberra", "ACT", "2601", "Apartment", 2, 2, 1, 0, 88, (620000, 680000, 740000), (550, 4.2), (-35.2809, 149.1300)),
    ("32", "234 Northbourne Avenue, Braddon ACT 2612", "234 Northbourne Avenue", "Braddon", "ACT", "2612", "Apartment", 1, 1, 1, 0, 52, (420000, 460000, 500000), (400, 4.5), (-35.2745, 149.1345)),
    ("33", "45 Salamanca Place, Hobart TAS 7000", "45 Salamanca Place", "Hobart", "TAS", "7000", "Apartment", 2, 1, 1, 0, 85, (580000, 650000, 720000), (480, 3.8), (-42.8821, 147.3272)),
    ("34", "78 Charles Street, Launceston TAS 7250", "78 Charles Street", "Launceston", "TAS", "7250", "House", 3, 2, 2, 550, 170, (480000, 540000, 600000), (420, 4.0), (-41.4332, 147.1441)),
    ("35", "33 Mitchell Street, Darwin NT 0800", "33 Mitchell Street", "Darwin", "NT", "0800", "Apartment", 2, 2, 1, 0, 85, (380000, 420000, 460000), (450, 5.6), (-12.4634, 130.8456)),
    ("36", "156 Stuart Highway, Alice Springs NT 0870", "156 Stuart Highway", "Alice Springs", "NT", "0870", "House", 3, 2, 2, 800, 160, (350000, 400000, 450000), (420, 5.5), (-23.6980, 133.8807)),
    ("VC-9552-CQ", "30 Shields Street, Redcliffe QLD 4020", "30 Shields Street", "Redcliffe", "QLD", "4020", "House", 3, 2, 2, 607, 190, (720000, 785000, 850000), (620, 4.1), (-27.2284, 153.1094)),
]

PROPERTY_IMAGES = {
    "VC-9552-CQ": [
        "https://kindred-property.s3.ap-southeast-2.amazonaws.com/properties/VC-9552-CQ/front.jpg",
        "https://kindred-property.s3.ap-southeast-2.amazonaws.com/properties/VC-9552-CQ/living.jpg",
        "https://kindred-property.s3.ap-southeast-2.amazonaws.com/properties/VC-9552-CQ/yard.jpg",
    ],
}

# property id -> [(address, sale price, sale date, beds, baths, land m2, distance km)]
COMPARABLE_ROWS = {
    "1": [
        ("115 Collins Street, Melbourne VIC 3000", 920000, "2023-11-15", 3, 2, 420, 0.2),
        ("130 Collins Street, Melbourne VIC 3000", 980000, "2023-09-22", 3, 2, 480, 0.3),
        ("98 Collins Street, Melbourne VIC 3000", 890000, "2023-08-10", 3, 1, 400, 0.4),
    ],
    "2": [
        ("38 Harbour Drive, Sydney NSW 2000", 750000, "2023-12-01", 2, 1, 0, 0.15),
        ("52 Harbour Drive, Sydney NSW 2000", 810000, "2023-10-18", 2, 2, 0, 0.25),
    ],
    "3": [
        ("65 Queen Street, Brisbane QLD 4000", 720000, "2023-11-05", 4, 2, 580, 0.3),
        ("90 Queen Street, Brisbane QLD 4000", 680000, "2023-09-12", 4, 2, 550, 0.5),
    ],
    "4": [
        ("8 King William Street, Adelaide SA 5000", 560000, "2023-10-20", 3, 2, 480, 0.2),
    ],
    "5": [
        ("48 St Georges Terrace, Perth WA 6000", 510000, "2023-11-28", 2, 1, 0, 0.18),
    ],
}

# property id -> [(name, type, rating, distance km, year range)]
SCHOOL_ROWS = {
    "1": [
        ("Melbourne Grammar School", "Private", 95, 0.8, "Prep-12"),
        ("Melbourne High School", "Public", 92, 1.2, "7-12"),
        ("St Kilda Primary School", "Public", 88, 2.1, "Prep-6"),
    ],
    "2": [
        ("Sydney Grammar School", "Private", 96, 0.5, "Prep-12"),
        ("Fort Street High School", "Public", 94, 1.0, "7-12"),
    ],
    "3": [
        ("Brisbane Grammar School", "Private", 93, 0.7, "Prep-12"),
        ("Brisbane State High School", "Public", 91, 1.5, "7-12"),
    ],
    "4": [
        ("Prince Alfred College", "Private", 89, 1.8, "Prep-12"),
        ("Adelaide High School", "Public", 87, 2.2, "7-12"),
    ],
    "5": [
        ("Hale School", "Private", 90, 3.5, "Prep-12"),
        ("Perth Modern School", "Public", 92, 4.2, "7-12"),
    ],
}

# property id -> [(sale price, sale date, sale type)]
SALES_HISTORY_ROWS = {
    "1": [
        (820000, "2018-06-15", "Private Sale"),
        (650000, "2012-03-22", "Auction"),
        (480000, "2005-11-10", "Private Sale"),
    ],
    "2": [
        (680000, "2019-09-12", "Private Sale"),
        (520000, "2014-07-08", "Auction"),
    ],
    "3": [
        (620000, "2020-02-20", "Auction"),
        (480000, "2015-05-15", "Private Sale"),
    ],
    "4": [
        (450000, "2017-08-30", "Private Sale"),
    ],
    "5": [
        (420000, "2018-11-18", "Auction"),
        (350000, "2013-04-25", "Private Sale"),
    ],
}

# (suburb, state) -> (median price, growth %, demand, population,
#                     avg days on market, auction clearance %)
SUBURB_INSIGHT_ROWS = {
    ("Melbourne", "VIC"): (950000, 5.2, "High", 150000, 28, 72),
    ("South Yarra", "VIC"): (1100000, 4.8, "Very High", 25000, 25, 75),
    ("Richmond", "VIC"): (1200000, 5.5, "High", 30000, 22, 78),
    ("St Kilda", "VIC"): (850000, 4.2, "High", 22000, 30, 70),
    ("Carlton", "VIC"): (780000, 3.8, "Medium", 18000, 32, 68),
    ("Armadale", "VIC"): (2500000, 3.2, "Very High", 12000, 35, 65),
    ("Hawthorn", "VIC"): (1800000, 3.5, "High", 28000, 28, 72),
    ("Sydney", "NSW"): (1200000, 3.8, "Very High", 200000, 35, 68),
    ("Bondi Beach", "NSW"): (2200000, 4.5, "Very High", 12000, 28, 75),
    ("Parramatta", "NSW"): (720000, 5.8, "High", 45000, 30, 70),
    ("Manly", "NSW"): (1650000, 4.0, "Very High", 18000, 25, 78),
    ("Newtown", "NSW"): (1500000, 4.2, "High", 15000, 22, 80),
    ("Crows Nest", "NSW"): (980000, 3.9, "High", 10000, 28, 72),
    ("Newcastle", "NSW"): (850000, 6.2, "High", 165000, 32, 65),
    ("Wollongong", "NSW"): (920000, 5.8, "High", 95000, 35, 62),
    ("Brisbane", "QLD"): (750000, 6.5, "High", 120000, 32, 65),
    ("South Brisbane", "QLD"): (680000, 7.2, "High", 8000, 28, 70),
    ("Fortitude Valley", "QLD"): (520000, 6.8, "Medium", 5000, 35, 62),
    ("Surfers Paradise", "QLD"): (850000, 8.5, "Very High", 25000, 30, 68),
    ("Noosa Heads", "QLD"): (1350000, 9.2, "Very High", 5000, 25, 75),
    ("Broadbeach", "QLD"): (780000, 7.8, "High", 12000, 28, 70),
    ("Airlie Beach", "QLD"): (620000, 5.5, "Medium", 3000, 45, 55),
    ("Cairns", "QLD"): (480000, 4.8, "Medium", 150000, 42, 52),
    ("Townsville", "QLD"): (420000, 3.2, "Low", 180000, 55, 45),
    ("Adelaide", "SA"): (580000, 4.1, "Medium", 80000, 38, 58),
    ("Glenelg", "SA"): (620000, 4.5, "High", 15000, 32, 65),
    ("Norwood", "SA"): (850000, 3.8, "High", 8000, 28, 70),
    ("Perth", "WA"): (520000, 2.9, "Medium", 90000, 42, 55),
    ("Fremantle", "WA"): (780000, 3.5, "High", 30000, 35, 62),
    ("Scarborough", "WA"): (680000, 4.2, "High", 15000, 32, 65),
    ("Canberra", "ACT"): (750000, 3.5, "High", 430000, 30, 68),
    ("Braddon", "ACT"): (580000, 4.2, "High", 5000, 28, 72),
    ("Hobart", "TAS"): (680000, 5.8, "High", 55000, 28, 70),
    ("Launceston", "TAS"): (520000, 4.5, "Medium", 90000, 35, 58),
    ("Darwin", "NT"): (480000, 2.2, "Low", 80000, 55, 42),
    ("Alice Springs", "NT"): (400000, 1.8, "Low", 25000, 65, 38),
}
