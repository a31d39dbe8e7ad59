"""Default entries written on first run."""

SEED_ENTRIES: list[dict] = [
    {
        "id": "1",
        "word": "Serendipity",
        "translation": "দৈবযোগ",
        "phonetic": "/ˌsɛr.ənˈdɪp.ɪ.ti/",
        "pronunciationBn": "সেরেনডিপিটি",
        "partOfSpeech": "noun (বিশেষ্য)",
        "meaning": "The occurrence of events by chance in a happy or beneficial way.",
        "description": "দৈবক্রমে শুভ বা আনন্দদায়ক কিছু খুঁজে পাওয়ার ঘটনা।",
        "synonyms": ["Chance", "Fate", "Fluke"],
        "antonyms": ["Misfortune", "Bad luck"],
        "examples": [
            "Finding this book was pure serendipity. (এই বইটি খুঁজে পাওয়া ছিল নিতান্তই এক সুখকর দৈবঘটনা।)",
            "We met by serendipity in the park. (পার্কে আমাদের দেখা হয়েছিল এক দৈবযোগে।)",
        ],
        "origin": "Coined by Horace Walpole in 1754.",
        "language": "en",
    },
    {
        "id": "2",
        "word": "সূর্যমুখী",
        "translation": "Sunflower",
        "phonetic": "/sur.jo.mu.kʰi/",
        "pronunciationBn": "সূর্‌জোমুখী",
        "partOfSpeech": "বিশেষ্য (noun)",
        "meaning": "A tall plant of the daisy family with very large golden-rayed flowers.",
        "description": "এক প্রকার বৃহৎ হলুদ রঙের ফুল যা সূর্যের দিকে মুখ করে থাকে।",
        "samas": "সূর্যের দিকে মুখ যার (বহুব্রীহি সমাস)",
        "source": "তৎসম",
        "synonyms": ["Sunflower"],
        "antonyms": [],
        "examples": [
            "সূর্যমুখী ফুল দেখতে খুব সুন্দর। (Sunflowers are very beautiful to look at.)",
            "ক্ষেতটি সূর্যমুখীতে ভরে গেছে। (The field is full of sunflowers.)",
        ],
        "language": "bn",
    },
    {
        "id": "3",
        "word": "বিদ্যালয়",
        "translation": "School",
        "phonetic": "/bid̪.d̪a.lɔe̯/",
        "pronunciationBn": "বিদ্‌দালয়",
        "partOfSpeech": "বিশেষ্য (noun)",
        "meaning": "An institution for educating children.",
        "description": "যেখানে শিক্ষার্থীরা নিয়মিত পাঠ গ্রহণ করে এমন শিক্ষাপ্রতিষ্ঠান।",
        "sandhi": "বিদ্যা + আলয়",
        "samas": "বিদ্যার আলয় (ষষ্ঠী তৎপুরুষ সমাস)",
        "source": "তৎসম",
        "sourceWord": "বিদ্যা",
        "synonyms": ["পাঠশালা", "স্কুল"],
        "antonyms": [],
        "examples": ["আমি প্রতিদিন বিদ্যালয়ে যাই। (I go to school every day.)"],
        "language": "bn",
    },
    {
        "id": "4",
        "word": "Knowledge",
        "translation": "জ্ঞান",
        "phonetic": "/ˈnɒl.ɪdʒ/",
        "pronunciationBn": "নলেজ",
        "partOfSpeech": "noun (বিশেষ্য)",
        "meaning": "Facts, information and skills acquired through experience or education.",
        "description": "অভিজ্ঞতা বা শিক্ষার মাধ্যমে অর্জিত তথ্য, বোধ ও দক্ষতা।",
        "etymology": "Middle English knowleche, from Old English cnāwan (to know).",
        "synonyms": ["Learning", "Wisdom", "Understanding"],
        "antonyms": ["Ignorance"],
        "examples": ["Knowledge is power. (জ্ঞানই শক্তি।)"],
        "language": "en",
    },
]
