"""
Sample advocate records for development and test databases.

Keys use the same camelCase names as the API so the seed command can load
them through AdvocateSchema.
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
    "Oncology",
]

ADVOCATES = [
    {
        "firstName": "John",
        "lastName": "Doe",
        "city": "New York",
        "degree": "MD",
        "specialties": SPECIALTIES[0:3],
        "yearsOfExperience": 10,
        "phoneNumber": 5551234567,
    },
    {
        "firstName": "Jane",
        "lastName": "Smith",
        "city": "Los Angeles",
        "degree": "PhD",
        "specialties": SPECIALTIES[3:6],
        "yearsOfExperience": 8,
        "phoneNumber": 5559876543,
    },
    {
        "firstName": "Alice",
        "lastName": "Johnson",
        "city": "Chicago",
        "degree": "MSW",
        "specialties": SPECIALTIES[6:9],
        "yearsOfExperience": 5,
        "phoneNumber": 5554567890,
    },
    {
        "firstName": "Michael",
        "lastName": "Brown",
        "city": "Houston",
        "degree": "MD",
        "specialties": SPECIALTIES[9:12],
        "yearsOfExperience": 12,
        "phoneNumber": 5556543210,
    },
    {
        "firstName": "Emily",
        "lastName": "Davis",
        "city": "Phoenix",
        "degree": "PhD",
        "specialties": SPECIALTIES[12:15],
        "yearsOfExperience": 7,
        "phoneNumber": 5553210987,
    },
    {
        "firstName": "Chris",
        "lastName": "Martinez",
        "city": "Philadelphia",
        "degree": "MSW",
        "specialties": SPECIALTIES[15:18],
        "yearsOfExperience": 9,
        "phoneNumber": 5557890123,
    },
    {
        "firstName": "Jessica",
        "lastName": "Taylor",
        "city": "San Antonio",
        "degree": "MD",
        "specialties": SPECIALTIES[18:21],
        "yearsOfExperience": 11,
        "phoneNumber": 5554561234,
    },
    {
        "firstName": "David",
        "lastName": "Harris",
        "city": "San Diego",
        "degree": "PhD",
        "specialties": SPECIALTIES[21:24],
        "yearsOfExperience": 6,
        "phoneNumber": 5557896543,
    },
    {
        "firstName": "Laura",
        "lastName": "Clark",
        "city": "Dallas",
        "degree": "MSW",
        "specialties": SPECIALTIES[24:26],
        "yearsOfExperience": 4,
        "phoneNumber": 5550123456,
    },
    {
        "firstName": "Daniel",
        "lastName": "Lewis",
        "city": "San Jose",
        "degree": "MD",
        "specialties": [SPECIALTIES[26], SPECIALTIES[0]],
        "yearsOfExperience": 13,
        "phoneNumber": 5553217654,
    },
    {
        "firstName": "Sarah",
        "lastName": "Lee",
        "city": "Austin",
        "degree": "PhD",
        "specialties": [SPECIALTIES[26], SPECIALTIES[13]],
        "yearsOfExperience": 10,
        "phoneNumber": 5551238765,
    },
    {
        "firstName": "James",
        "lastName": "King",
        "city": "Jacksonville",
        "degree": "MSW",
        "specialties": SPECIALTIES[1:4],
        "yearsOfExperience": 5,
        "phoneNumber": 5556540987,
    },
    {
        "firstName": "Megan",
        "lastName": "Green",
        "city": "San Francisco",
        "degree": "MD",
        "specialties": SPECIALTIES[4:7],
        "yearsOfExperience": 14,
        "phoneNumber": 5559873456,
    },
    {
        "firstName": "Joshua",
        "lastName": "Walker",
        "city": "Columbus",
        "degree": "PhD",
        "specialties": SPECIALTIES[7:10],
        "yearsOfExperience": 9,
        "phoneNumber": 5556781234,
    },
    {
        "firstName": "Amanda",
        "lastName": "Hall",
        "city": "Fort Worth",
        "degree": "MSW",
        "specialties": SPECIALTIES[10:13],
        "yearsOfExperience": 3,
        "phoneNumber": 5559872345,
    },
]
