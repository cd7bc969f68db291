"""
seed/advocates.py - Static Advocate Seed Data

The directory's fixed record collection, keyed by the wire field names.
It is served directly in "seed" mode and written to the advocates table by
the seeding command.
"""

SPECIALTIES = [
    "Bipolar",
    "LGBTQ",
    "Medication/Prescribing",
    "Suicide History/Attempts",
    "General Mental Health (anxiety, depression, stress, grief, life transitions)",
    "Men's issues",
    "Relationship Issues (family, friends, couple, etc)",
    "Trauma & PTSD",
    "Personality disorders",
    "Personal growth",
    "Substance use/abuse",
    "Pediatrics",
    "Women's issues (post-partum, infertility, family planning)",
    "Chronic pain",
    "Weight loss & nutrition",
    "Eating disorders",
    "Diabetic Diet and nutrition",
    "Coaching (leadership, career, academic and wellness)",
    "Life coaching",
    "Obsessive-compulsive disorders",
    "Neuropsychological evaluations & testing (ADHD testing)",
    "Attention and Hyperactivity (ADHD)",
    "Sleep issues",
    "Schizophrenia and psychotic disorders",
    "Learning disorders",
    "Domestic abuse",
]

ADVOCATE_DATA = [
    {
        "firstName": "John",
        "lastName": "Doe",
        "city": "New York",
        "degree": "MD",
        "specialties": [SPECIALTIES[0], SPECIALTIES[2], SPECIALTIES[4]],
        "yearsOfExperience": 10,
        "phoneNumber": 5551234567,
    },
    {
        "firstName": "Jane",
        "lastName": "Smith",
        "city": "Los Angeles",
        "degree": "PhD",
        "specialties": [SPECIALTIES[7], SPECIALTIES[6]],
        "yearsOfExperience": 8,
        "phoneNumber": 5559876543,
    },
    {
        "firstName": "Alice",
        "lastName": "Johnson",
        "city": "Chicago",
        "degree": "MSW",
        "specialties": [SPECIALTIES[10], SPECIALTIES[25], SPECIALTIES[1]],
        "yearsOfExperience": 5,
        "phoneNumber": 5554567890,
    },
    {
        "firstName": "Michael",
        "lastName": "Brown",
        "city": "Houston",
        "degree": "MD",
        "specialties": [SPECIALTIES[2], SPECIALTIES[23]],
        "yearsOfExperience": 12,
        "phoneNumber": 5556543210,
    },
    {
        "firstName": "Emily",
        "lastName": "Davis",
        "city": "Phoenix",
        "degree": "PhD",
        "specialties": [SPECIALTIES[20], SPECIALTIES[21], SPECIALTIES[24]],
        "yearsOfExperience": 7,
        "phoneNumber": 5553210987,
    },
    {
        "firstName": "Chris",
        "lastName": "Martinez",
        "city": "Philadelphia",
        "degree": "MSW",
        "specialties": [SPECIALTIES[5], SPECIALTIES[6]],
        "yearsOfExperience": 9,
        "phoneNumber": 5557890123,
    },
    {
        "firstName": "Jessica",
        "lastName": "Taylor",
        "city": "San Antonio",
        "degree": "MD",
        "specialties": [SPECIALTIES[12], SPECIALTIES[11]],
        "yearsOfExperience": 11,
        "phoneNumber": 5554561234,
    },
    {
        "firstName": "David",
        "lastName": "Harris",
        "city": "San Diego",
        "degree": "PhD",
        "specialties": [SPECIALTIES[8], SPECIALTIES[19]],
        "yearsOfExperience": 6,
        "phoneNumber": 5557896543,
    },
    {
        "firstName": "Laura",
        "lastName": "Clark",
        "city": "Dallas",
        "degree": "MSW",
        "specialties": [SPECIALTIES[17], SPECIALTIES[18], SPECIALTIES[9]],
        "yearsOfExperience": 4,
        "phoneNumber": 5550123456,
    },
    {
        "firstName": "Daniel",
        "lastName": "Lewis",
        "city": "San Jose",
        "degree": "MD",
        "specialties": [SPECIALTIES[13], SPECIALTIES[22]],
        "yearsOfExperience": 13,
        "phoneNumber": 5553217654,
    },
    {
        "firstName": "Sarah",
        "lastName": "Lee",
        "city": "Austin",
        "degree": "PhD",
        "specialties": [SPECIALTIES[15], SPECIALTIES[14]],
        "yearsOfExperience": 10,
        "phoneNumber": 5551238765,
    },
    {
        "firstName": "James",
        "lastName": "King",
        "city": "Jacksonville",
        "degree": "MSW",
        "specialties": [SPECIALTIES[3], SPECIALTIES[7]],
        "yearsOfExperience": 5,
        "phoneNumber": 5556540987,
    },
    {
        "firstName": "Megan",
        "lastName": "Green",
        "city": "San Francisco",
        "degree": "MD",
        "specialties": [SPECIALTIES[16], SPECIALTIES[14], SPECIALTIES[4]],
        "yearsOfExperience": 14,
        "phoneNumber": 5558907654,
    },
    {
        "firstName": "Joshua",
        "lastName": "Walker",
        "city": "Columbus",
        "degree": "PhD",
        "specialties": [SPECIALTIES[0], SPECIALTIES[8]],
        "yearsOfExperience": 3,
        "phoneNumber": 5556789012,
    },
    {
        "firstName": "Amanda",
        "lastName": "Hall",
        "city": "Fort Worth",
        "degree": "MSW",
        "specialties": [SPECIALTIES[1], SPECIALTIES[25], SPECIALTIES[9]],
        "yearsOfExperience": 7,
        "phoneNumber": 5559012345,
    },
]
