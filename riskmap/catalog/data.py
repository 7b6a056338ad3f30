# riskmap/catalog/data.py
"""Reference regions, intervention library and seasonal calendar."""

REGIONS = [
    {
        "identifier": "region1",
        "name": "West Bengal",
        "center": (23.0, 87.0),
        "base_risk_score": 0.72,
        "coordinates": [(22.5, 86.5), (22.5, 87.5), (23.5, 87.5), (23.5, 86.5)],
    },
    {
        "identifier": "region2",
        "name": "Kerala",
        "center": (10.8505, 76.2711),
        "base_risk_score": 0.65,
        "coordinates": [(10.5, 75.5), (10.5, 77.0), (11.5, 77.0), (11.5, 75.5)],
    },
    {
        "identifier": "region3",
        "name": "Bangladesh (Rangpur)",
        "center": (25.7439, 89.2752),
        "base_risk_score": 0.81,
        "coordinates": [(25.3, 88.8), (25.3, 89.7), (26.2, 89.7), (26.2, 88.8)],
    },
    {
        "identifier": "region4",
        "name": "Malaysia (Perak)",
        "center": (4.7711, 101.0449),
        "base_risk_score": 0.45,
        "coordinates": [(4.3, 100.6), (4.3, 101.4), (5.2, 101.4), (5.2, 100.6)],
    },
]

INTERVENTIONS = [
    {
        "id": "fruit-netting",
        "name": "Fruit Netting Implementation",
        "description": "Covering fruit trees with nets to prevent bat access",
        "impact": {"parameter": "fruit_consumption_practices", "effect": -0.15},
    },
    {
        "id": "pig-quarantine",
        "name": "Pig Farm Biosecurity",
        "description": "Enhanced biosecurity measures on pig farms",
        "impact": {"parameter": "pig_farming_intensity", "effect": -0.2},
    },
    {
        "id": "health-camps",
        "name": "Health Camp Setup",
        "description": "Establishing temporary healthcare facilities",
        "impact": {"parameter": "healthcare_infrastructure", "effect": 0.2},
    },
    {
        "id": "bat-habitat",
        "name": "Bat Habitat Management",
        "description": "Creating alternative habitats away from human settlements",
        "impact": {"parameter": "bat_density", "effect": -0.15},
    },
    {
        "id": "public-awareness",
        "name": "Public Awareness Campaigns",
        "description": "Education about avoiding high-risk behaviors",
        "impact": {"parameter": "human_population_density", "effect": -0.1},
    },
    {
        "id": "forest-conservation",
        "name": "Forest Conservation",
        "description": "Preventing deforestation and habitat fragmentation",
        "impact": {"parameter": "environmental_degradation", "effect": -0.2},
    },
]

SEASONAL_EVENTS = [
    {
        "id": "fruit-season",
        "name": "January: Fruit Season",
        "months": [1, 2],
        "icon": "ri-calendar-event-line",
        "affects": {"parameter": "fruit_consumption_practices", "effect": 0.2},
    },
    {
        "id": "monsoon",
        "name": "June-August: Monsoon",
        "months": [6, 7, 8],
        "icon": "ri-rainy-line",
        "affects": {"parameter": "bat_density", "effect": 0.15},
    },
    {
        "id": "bat-migration",
        "name": "October: Bat Migration",
        "months": [10],
        "icon": "ri-flight-takeoff-line",
        "affects": {"parameter": "bat_density", "effect": 0.25},
    },
    {
        "id": "harvest-festival",
        "name": "November: Harvest Festival",
        "months": [11],
        "icon": "ri-plant-line",
        "affects": {"parameter": "human_population_density", "effect": 0.1},
    },
    {
        "id": "deforestation-season",
        "name": "March-April: Deforestation Activity",
        "months": [3, 4],
        "icon": "ri-scissors-cut-line",
        "affects": {"parameter": "environmental_degradation", "effect": 0.15},
    },
]

INDIAN_STATES = [
    "Andhra Pradesh", "Arunachal Pradesh", "Assam", "Bihar", "Chhattisgarh", "Goa",
    "Gujarat", "Haryana", "Himachal Pradesh", "Jharkhand", "Karnataka", "Kerala",
    "Madhya Pradesh", "Maharashtra", "Manipur", "Meghalaya", "Mizoram", "Nagaland",
    "Odisha", "Punjab", "Rajasthan", "Sikkim", "Tamil Nadu", "Telangana",
    "Tripura", "Uttar Pradesh", "Uttarakhand", "West Bengal",
]

DISTRICTS_BY_STATE = {
    "Andhra Pradesh": ["Visakhapatnam", "Vijayawada", "Tirupati", "Guntur", "Nellore", "Kurnool", "Kakinada", "Anantapur", "Kadapa", "Eluru", "Ongole"],
    "Arunachal Pradesh": ["Itanagar", "Naharlagun", "Pasighat", "Tawang", "Bomdila", "Ziro", "Tezu", "Roing", "Yingkiong", "Aalo"],
    "Assam": ["Guwahati", "Silchar", "Dibrugarh", "Jorhat", "Tezpur", "Nagaon", "Bongaigaon", "Tinsukia", "Goalpara", "Karimganj", "Dhubri"],
    "Bihar": ["Patna", "Gaya", "Muzaffarpur", "Bhagalpur", "Darbhanga", "Arrah", "Begusarai", "Chhapra", "Katihar", "Purnia", "Samastipur"],
    "Chhattisgarh": ["Raipur", "Bilaspur", "Bhilai", "Korba", "Durg", "Rajnandgaon", "Raigarh", "Jagdalpur", "Ambikapur", "Dhamtari"],
    "Goa": ["Panaji", "Margao", "Vasco da Gama", "Mapusa", "Ponda", "Curchorem", "Canacona", "Bicholim", "Pernem", "Quepem"],
    "Gujarat": ["Ahmedabad", "Surat", "Vadodara", "Rajkot", "Bhavnagar", "Jamnagar", "Gandhinagar", "Junagadh", "Anand", "Bharuch", "Patan"],
    "Haryana": ["Faridabad", "Gurgaon", "Panipat", "Ambala", "Hisar", "Karnal", "Rohtak", "Sonipat", "Yamunanagar", "Panchkula"],
    "Himachal Pradesh": ["Shimla", "Mandi", "Dharamshala", "Solan", "Kullu", "Hamirpur", "Nahan", "Chamba", "Bilaspur", "Una"],
    "Jharkhand": ["Ranchi", "Jamshedpur", "Dhanbad", "Bokaro", "Hazaribagh", "Deoghar", "Giridih", "Ramgarh", "Phusro", "Medininagar"],
    "Karnataka": ["Bengaluru", "Mysuru", "Mangaluru", "Belagavi", "Kalaburagi", "Hubballi", "Shivamogga", "Tumakuru", "Davanagere", "Ballari", "Vijayapura"],
    "Kerala": ["Kozhikode", "Malappuram", "Kannur", "Wayanad", "Thrissur", "Palakkad", "Ernakulam", "Idukki", "Thiruvananthapuram", "Kollam", "Kottayam"],
    "Madhya Pradesh": ["Bhopal", "Indore", "Jabalpur", "Gwalior", "Ujjain", "Sagar", "Dewas", "Satna", "Rewa", "Ratlam", "Singrauli"],
    "Maharashtra": ["Mumbai", "Pune", "Nagpur", "Thane", "Nashik", "Aurangabad", "Solapur", "Kolhapur", "Amravati", "Nanded", "Sangli"],
    "Manipur": ["Imphal", "Thoubal", "Bishnupur", "Senapati", "Ukhrul", "Chandel", "Churachandpur", "Tamenglong", "Jiribam", "Kangpokpi"],
    "Meghalaya": ["Shillong", "Tura", "Jowai", "Nongstoin", "Williamnagar", "Baghmara", "Resubelpara", "Khliehriat", "Mawkyrwat", "Ampati"],
    "Mizoram": ["Aizawl", "Lunglei", "Champhai", "Kolasib", "Serchhip", "Siaha", "Lawngtlai", "Mamit", "Khawzawl", "Saitual"],
    "Nagaland": ["Kohima", "Dimapur", "Mokokchung", "Tuensang", "Wokha", "Zunheboto", "Phek", "Mon", "Peren", "Kiphire"],
    "Odisha": ["Bhubaneswar", "Cuttack", "Rourkela", "Brahmapur", "Sambalpur", "Puri", "Balasore", "Bhadrak", "Baripada", "Jeypore", "Jharsuguda"],
    "Punjab": ["Ludhiana", "Amritsar", "Jalandhar", "Patiala", "Bathinda", "Hoshiarpur", "Mohali", "Batala", "Pathankot", "Moga"],
    "Rajasthan": ["Jaipur", "Jodhpur", "Udaipur", "Kota", "Bikaner", "Ajmer", "Bharatpur", "Sikar", "Alwar", "Bhilwara"],
    "Sikkim": ["Gangtok", "Namchi", "Gyalshing", "Mangan", "Rangpo", "Singtam", "Jorethang", "Nayabazar", "Chungthang", "Ravangla"],
    "Tamil Nadu": ["Chennai", "Coimbatore", "Madurai", "Salem", "Tiruchirapalli", "Tirunelveli", "Erode", "Tiruppur", "Vellore", "Thanjavur", "Dindigul"],
    "Telangana": ["Hyderabad", "Warangal", "Nizamabad", "Karimnagar", "Khammam", "Ramagundam", "Mahbubnagar", "Nalgonda", "Adilabad", "Suryapet", "Siddipet"],
    "Tripura": ["Agartala", "Udaipur", "Dharmanagar", "Kailashahar", "Belonia", "Khowai", "Ambassa", "Sonamura", "Sabroom", "Santirbazar"],
    "Uttar Pradesh": ["Lucknow", "Kanpur", "Ghaziabad", "Agra", "Varanasi", "Meerut", "Prayagraj", "Aligarh", "Bareilly", "Moradabad", "Saharanpur"],
    "Uttarakhand": ["Dehradun", "Haridwar", "Roorkee", "Haldwani", "Rudrapur", "Kashipur", "Rishikesh", "Pithoragarh", "Ramnagar", "Khatima"],
    "West Bengal": ["Kolkata", "Siliguri", "Howrah", "Darjeeling", "Jalpaiguri", "Cooch Behar", "Alipurduar", "Durgapur", "Asansol", "Kharagpur", "Malda"],
}
