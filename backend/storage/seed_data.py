"""
Default rows written on first boot
"""

DEFAULT_SITE_SETTINGS = [
    ("footer_company_name", "شركة رند للاستثمار العقاري و تطويره"),
    ("footer_description", "شريكك الموثوق في الأراضي في عمان. نتخصص في ربط المشترين والمستثمرين بالأراضي الاستثنائية في جميع أنحاء منطقة عمان الكبرى."),
    ("footer_address", "الصويفية - مجمع فرح التجاري - الطابق الثاني"),
    ("footer_phone", "+962 6 5826440"),
    ("footer_fax", "+962 6 5826408"),
    ("footer_mobile1", "+962 79 5566030"),
    ("footer_mobile2", "+962 77 5566030"),
    ("footer_po_box", "ص.ب: 37 عمان 11831 الأردن"),
    ("footer_manager", "المدير العام: فؤاد حدادين"),
    ("footer_working_hours", "الأحد إلى الخميس\n9:30 صباحاً - 5:00 مساءً"),
    ("footer_email", "info@randrealestate.com"),
    ("footer_website", "www.randrealestate.com"),
    ("footer_social_facebook", "#"),
    ("footer_social_instagram", "#"),
    ("footer_social_linkedin", "#"),
]

# (name_ar, name_en); Amman must stay first, sample listings point at it
JORDAN_GOVERNORATES = [
    ("عمان", "Amman"),
    ("إربد", "Irbid"),
    ("الزرقاء", "Zarqa"),
    ("البلقاء", "Balqa"),
    ("مادبا", "Madaba"),
    ("الكرك", "Karak"),
    ("الطفيلة", "Tafileh"),
    ("معان", "Ma'an"),
    ("العقبة", "Aqaba"),
    ("جرش", "Jerash"),
    ("عجلون", "Ajloun"),
    ("المفرق", "Mafraq"),
]

AMMAN_DIRECTORATES = [
    ("قصبة عمان", "Qasabat Amman"),
    ("الجامعة", "Al Jame'a"),
    ("وادي السير", "Wadi Al Seer"),
    ("أبو نصير", "Abu Nseir"),
    ("ماركا", "Marka"),
    ("القويسمة", "Al Quwaysimah"),
    ("سحاب", "Sahab"),
    ("الموقر", "Al Muwaqqar"),
    ("ناعور", "Naur"),
]

DEFAULT_PROPERTY_TYPES = [
    ("أرض سكنية", "Residential Land"),
    ("أرض تجارية", "Commercial Land"),
    ("أرض صناعية", "Industrial Land"),
    ("أرض زراعية", "Agricultural Land"),
    ("أرض خدماتية", "Service Land"),
    ("أرض مختلطة", "Mixed Use Land"),
]

# directorate_index points into AMMAN_DIRECTORATES; all samples are in Amman
SAMPLE_PROPERTIES = [
    {
        "title": "أرض سكنية في عبدون",
        "description": "أرض سكنية جميلة مع إطلالة على المدينة في منطقة عبدون المرموقة. موقع مميز للاستثمار العقاري الفاخر.",
        "price": "200000",
        "size": 800,
        "property_type": "land",
        "location": "عبدون، عمان",
        "address": "دوار عبدون، عمان",
        "images": [
            "https://images.pexels.com/photos/1595104/pexels-photo-1595104.jpeg?auto=compress&cs=tinysrgb&w=800",
            "https://images.pexels.com/photos/2437297/pexels-photo-2437297.jpeg?auto=compress&cs=tinysrgb&w=800",
        ],
        "directorate_index": 0,
        "village": "عبدون",
        "basin": "حوض عبدون",
        "neighborhood": "حي الدوار الأول",
        "plot_number": "201",
        "featured": True,
    },
    {
        "title": "مزرعة فاخرة في الصويفية",
        "description": "مزرعة فاخرة مع أرض واسعة في منطقة الصويفية. مناسبة للعائلات الباحثة عن الراحة والأناقة في قلب عمان.",
        "price": "450000",
        "size": 2500,
        "property_type": "farm",
        "location": "الصويفية، عمان",
        "address": "شارع الثقافة، الصويفية",
        "images": [
            "https://images.pexels.com/photos/2132180/pexels-photo-2132180.jpeg?auto=compress&cs=tinysrgb&w=800",
        ],
        "directorate_index": 2,
        "village": "الصويفية",
        "basin": "حوض الصويفية",
        "neighborhood": "حي شارع الثقافة",
        "plot_number": "105",
        "featured": False,
    },
    {
        "title": "أرض زراعية في جبل عمان",
        "description": "أرض زراعية خصبة في منطقة جبل عمان التاريخية. مناسبة للاستثمار الزراعي أو إقامة مزرعة صغيرة.",
        "price": "95000",
        "size": 1200,
        "property_type": "farm",
        "location": "جبل عمان، عمان",
        "address": "شارع الرينبو، جبل عمان",
        "images": ["/uploads/land-property-2.svg"],
        "directorate_index": 0,
        "featured": True,
    },
    {
        "title": "قطعة أرض تجارية في دابوق",
        "description": "قطعة أرض تجارية مميزة في منطقة دابوق الراقية. موقع ممتاز للاستثمار التجاري أو إقامة مشروع سكني فاخر.",
        "price": "320000",
        "size": 1000,
        "property_type": "land",
        "location": "دابوق، عمان",
        "address": "شارع دابوق الرئيسي، عمان",
        "images": ["/uploads/land-property-2.svg", "/uploads/land-property-3.svg"],
        "directorate_index": 1,
        "featured": True,
    },
    {
        "title": "أرض تجارية في جبل اللويبدة",
        "description": "أرض تجارية أصيلة في منطقة جبل اللويبدة النابضة بالحياة. فرصة استثمارية ممتازة في المنطقة الثقافية.",
        "price": "175000",
        "size": 650,
        "property_type": "land",
        "location": "جبل اللويبدة، عمان",
        "address": "الدوار الأول، جبل اللويبدة",
        "images": ["/uploads/land-property-3.svg", "/uploads/land-property-1.svg"],
        "directorate_index": 0,
        "featured": False,
    },
    {
        "title": "قطعة أرض في الشميساني",
        "description": "قطعة أرض عصرية في الحي التجاري الشميساني. موقع قريب من الخدمات مع سهولة الوصول إلى المدينة.",
        "price": "150000",
        "size": 550,
        "property_type": "land",
        "location": "الشميساني، عمان",
        "address": "شارع الشريف عبد الحميد شرف، الشميساني",
        "images": ["/uploads/land-property-1.svg", "/uploads/land-property-2.svg"],
        "directorate_index": 0,
        "featured": False,
    },
]


def sample_property_payloads(governorate_id, directorate_ids):
    """Yield PropertyCreate kwargs with location ids resolved"""
    for sample in SAMPLE_PROPERTIES:
        payload = dict(sample)
        index = payload.pop("directorate_index")
        payload["governorate_id"] = governorate_id
        payload["directorate_id"] = directorate_ids[index] if index < len(directorate_ids) else None
        yield payload
