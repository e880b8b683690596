"""
Multilingual Lexicon

Domain dictionary and typo table used by the lexical normalizer.

DOMAIN_DICTIONARY maps a canonical English concept to the surface forms
buyers type in each supported language. Only the words the intent rules
care about are listed: price and quantity vocabulary, stock, delivery,
quality signals, sort and comparison verbs, part categories, condition,
country-of-origin adjectives, fuel and vehicle types, and generic verbs.

TYPO_CORRECTIONS is applied to every query, English included.
"""

from .intent import Language

DE, FR, ES, PT, IT, NL, PL, TR = (
    Language.DE, Language.FR, Language.ES, Language.PT,
    Language.IT, Language.NL, Language.PL, Language.TR,
)
RU, AR, ZH, JA, KO = Language.RU, Language.AR, Language.ZH, Language.JA, Language.KO


# =============================================================================
# DOMAIN DICTIONARY (english concept -> {language: surface forms})
# =============================================================================
DOMAIN_DICTIONARY = {
    # ── Price ────────────────────────────────────────────
    "cheap": {
        ZH: ("便宜", "廉价", "低价"), JA: ("安い", "格安"), KO: ("저렴한", "싼"),
        RU: ("дешевые", "дешевый", "дешевая", "дешево", "недорогие", "недорогой"),
        AR: ("رخيص", "رخيصة"), DE: ("billig", "billige", "günstig", "günstige", "preiswert"),
        FR: ("pas cher", "pas chère", "bon marché", "économique"),
        ES: ("barato", "barata", "baratos", "baratas", "económico"),
        PT: ("barato", "barata", "baratos", "baratas"), IT: ("economico", "economici", "a buon mercato"),
        NL: ("goedkoop", "goedkope"), PL: ("tani", "tanie", "tania"), TR: ("ucuz",),
    },
    "cheapest": {
        ZH: ("最便宜",), JA: ("最安", "最安値"), KO: ("가장 저렴한", "최저가"),
        RU: ("самый дешевый", "самые дешевые", "самая дешевая"), AR: ("الأرخص", "الارخص"),
        DE: ("billigste", "günstigste", "günstigsten"), FR: ("le moins cher", "les moins chers"),
        ES: ("más barato", "mas barato", "más baratos"), PT: ("mais barato", "mais baratos"),
        IT: ("più economico", "più economici"), NL: ("goedkoopste",),
        PL: ("najtańszy", "najtańsze"), TR: ("en ucuz",),
    },
    "expensive": {
        ZH: ("昂贵",), JA: ("高価",), RU: ("дорогие", "дорогой"), AR: ("غالي", "غالية"),
        DE: ("teuer", "teure"), FR: ("cher", "chère"), ES: ("caro", "cara"),
        PT: ("caro", "cara"), IT: ("costoso", "costosi"), NL: ("duur", "dure"),
        PL: ("drogi", "drogie"), TR: ("pahalı",),
    },
    "price": {
        ZH: ("价格", "价钱"), JA: ("価格", "値段"), KO: ("가격",), RU: ("цена", "цене", "цены", "цену"),
        AR: ("سعر", "السعر"), DE: ("preis", "preise"), FR: ("prix",), ES: ("precio", "precios"),
        PT: ("preço", "preços"), IT: ("prezzo", "prezzi"), NL: ("prijs",), PL: ("cena", "ceny"),
        TR: ("fiyat", "fiyatı"),
    },
    "under": {
        ZH: ("低于", "不超过"), KO: ("미만",), RU: ("до", "дешевле", "меньше", "не более"),
        AR: ("أقل من", "اقل من"), DE: ("unter", "bis", "höchstens"), FR: ("moins de", "sous"),
        ES: ("menos de", "por debajo de", "hasta"), PT: ("menos de", "abaixo de", "até"),
        IT: ("meno di", "sotto", "fino a"), NL: ("onder", "minder dan"), PL: ("poniżej", "do"),
        TR: ("altında",),
    },
    "or less": {ZH: ("以下", "以内"), JA: ("以下", "以内"), KO: ("이하",)},
    "or more": {ZH: ("以上",), JA: ("以上",), KO: ("이상",)},
    "over": {
        ZH: ("高于", "超过"), RU: ("больше", "свыше", "более"), AR: ("أكثر من", "اكثر من"),
        DE: ("über", "ab", "mindestens"), FR: ("plus de",), ES: ("más de", "mas de"),
        PT: ("mais de",), IT: ("più di",), NL: ("boven", "meer dan"), PL: ("powyżej",),
        TR: ("üzerinde", "üstü"),
    },
    "between": {
        RU: ("между", "от"), DE: ("zwischen",), FR: ("entre",), ES: ("entre",), PT: ("entre",),
        IT: ("tra",), NL: ("tussen",), PL: ("między",),
    },
    "and": {
        RU: ("и",), DE: ("und",), FR: ("et",), ES: ("y",), PT: ("e",), IT: ("e",),
        NL: ("en",), PL: ("i",), TR: ("ve",), ZH: ("和",), AR: ("و",),
    },
    "to": {ZH: ("到", "至"), JA: ("から",)},
    "around": {
        ZH: ("左右", "大约"), RU: ("около", "примерно"), AR: ("حوالي",), DE: ("etwa", "ungefähr", "circa"),
        FR: ("environ",), ES: ("alrededor de", "aproximadamente"), PT: ("cerca de", "aproximadamente"),
        IT: ("circa",), NL: ("ongeveer",), PL: ("około",), TR: ("yaklaşık",),
    },
    # ── Stock ────────────────────────────────────────────
    "in stock": {
        ZH: ("在库", "有货", "现货", "有库存"), JA: ("在庫あり", "在庫"), KO: ("재고 있음", "재고"),
        RU: ("в наличии", "наличие"), AR: ("متوفر", "متوفرة", "في المخزون"),
        DE: ("auf lager", "vorrätig", "lieferbar"), FR: ("en stock", "disponible", "disponibles"),
        ES: ("en stock", "disponible", "disponibles", "en existencia"), PT: ("em estoque", "disponível"),
        IT: ("disponibile", "disponibili", "in magazzino"), NL: ("op voorraad",),
        PL: ("w magazynie", "dostępny", "dostępne"), TR: ("stokta", "stokta var"),
    },
    "high stock": {
        ZH: ("库存充足", "大量库存"), RU: ("большой запас", "много на складе"),
        DE: ("großer lagerbestand", "hoher bestand"), FR: ("stock important",),
        ES: ("mucho stock", "gran stock"), PT: ("muito estoque",), TR: ("bol stok",),
    },
    # ── Delivery ─────────────────────────────────────────
    "fast delivery": {
        ZH: ("快速发货", "快速配送", "快递", "尽快"), JA: ("即納", "速達", "至急"), KO: ("빠른 배송", "급송"),
        RU: ("быстрая доставка", "срочная доставка", "срочно", "быстро"),
        AR: ("توصيل سريع", "شحن سريع", "عاجل"), DE: ("schnelle lieferung", "schnell", "eilig", "express"),
        FR: ("livraison rapide", "rapide", "urgent"), ES: ("entrega rápida", "envío rápido", "rápido", "urgente"),
        PT: ("entrega rápida", "rápido", "urgente"), IT: ("consegna rapida", "veloce", "urgente"),
        NL: ("snelle levering", "snel", "spoed"), PL: ("szybka dostawa", "szybko", "pilne"),
        TR: ("hızlı teslimat", "hızlı", "acil"),
    },
    "delivery": {
        ZH: ("发货", "配送", "交货"), JA: ("配送", "納期"), KO: ("배송",),
        RU: ("доставка", "доставкой", "доставки"), AR: ("توصيل", "التوصيل", "شحن"),
        DE: ("lieferung", "lieferzeit", "versand"), FR: ("livraison",), ES: ("entrega", "envío"),
        PT: ("entrega",), IT: ("consegna",), NL: ("levering",), PL: ("dostawa", "dostawą"),
        TR: ("teslimat",),
    },
    "within": {
        RU: ("в течение", "за"), DE: ("innerhalb", "binnen"), FR: ("en moins de",),
        ES: ("en menos de",), PT: ("em até",), IT: ("entro",), NL: ("binnen",), PL: ("w ciągu",),
        AR: ("خلال",),
    },
    "days": {
        ZH: ("天",), JA: ("日以内",), RU: ("дней", "дня", "день"), AR: ("أيام", "ايام", "يوم"),
        DE: ("tage", "tagen"), FR: ("jours",), ES: ("días", "dias"), PT: ("dias",),
        IT: ("giorni",), NL: ("dagen",), PL: ("dni",), TR: ("gün", "günde"),
    },
    # ── Quality ──────────────────────────────────────────
    "oem": {
        ZH: ("原厂", "原装"), JA: ("純正",), KO: ("순정",),
        RU: ("оригинальные", "оригинальный", "оригинал"), AR: ("أصلي", "أصلية", "اصلي"),
        DE: ("originalteil", "originalteile", "erstausrüster"), FR: ("d'origine",),
        ES: ("originales",), PT: ("originais", "genuíno"), IT: ("originale", "originali"),
        NL: ("origineel", "originele"), PL: ("oryginalne", "oryginalny"), TR: ("orijinal",),
    },
    "aftermarket": {
        ZH: ("副厂",), JA: ("社外品", "社外"), RU: ("неоригинальные", "неоригинал"),
        DE: ("nachbau", "nachbauteile"), FR: ("adaptable", "adaptables"),
        ES: ("alternativo", "compatible"), PT: ("paralelo", "compatível"), IT: ("compatibile",),
        PL: ("zamiennik", "zamienniki"), TR: ("muadil", "yan sanayi"),
    },
    "warranty": {
        ZH: ("保修", "质保"), JA: ("保証",), KO: ("보증",), RU: ("гарантия", "гарантией"),
        AR: ("ضمان",), DE: ("garantie", "gewährleistung"), FR: ("garantie",), ES: ("garantía",),
        PT: ("garantia",), IT: ("garanzia",), NL: ("garantie",), PL: ("gwarancja", "gwarancją"),
        TR: ("garanti", "garantili"),
    },
    "high quality": {
        ZH: ("高质量", "优质"), JA: ("高品質",), KO: ("고품질",), RU: ("качественные", "высокое качество"),
        AR: ("جودة عالية",), DE: ("hochwertig", "hochwertige"), FR: ("haute qualité",),
        ES: ("alta calidad",), PT: ("alta qualidade",), IT: ("alta qualità",),
        NL: ("hoge kwaliteit",), PL: ("wysokiej jakości",), TR: ("kaliteli", "yüksek kalite"),
    },
    "certified": {
        ZH: ("认证",), JA: ("認証",), RU: ("сертифицированный", "сертифицированные"),
        AR: ("معتمد",), DE: ("zertifiziert", "zertifizierte"), FR: ("certifié",),
        ES: ("certificado",), PT: ("certificado",), IT: ("certificato",), NL: ("gecertificeerd",),
        PL: ("certyfikowany",), TR: ("sertifikalı",),
    },
    # ── Condition ────────────────────────────────────────
    "new": {
        ZH: ("全新",), JA: ("新品",), RU: ("новые", "новый", "новая"), AR: ("جديد", "جديدة"),
        DE: ("neu", "neue", "neuer"), FR: ("neuf", "neuve", "neufs"), ES: ("nuevo", "nueva", "nuevos"),
        PT: ("novo", "nova", "novos"), IT: ("nuovo", "nuova", "nuovi"), NL: ("nieuw", "nieuwe"),
        PL: ("nowy", "nowe"), TR: ("yeni", "sıfır"),
    },
    "used": {
        ZH: ("二手",), JA: ("中古",), KO: ("중고",), RU: ("б/у", "бу", "подержанные"),
        AR: ("مستعمل", "مستعملة"), DE: ("gebraucht", "gebrauchte"), FR: ("d'occasion", "occasion"),
        ES: ("usado", "usada", "usados"), PT: ("usado", "usados"), IT: ("usato", "usati"),
        NL: ("gebruikt", "tweedehands"), PL: ("używany", "używane"), TR: ("ikinci el", "kullanılmış"),
    },
    # ── Sort / comparison / generic verbs ────────────────
    "best": {
        ZH: ("最好", "最佳"), JA: ("ベスト",), KO: ("최고",), RU: ("лучшие", "лучший"),
        AR: ("أفضل", "افضل"), DE: ("beste", "besten"), FR: ("meilleur", "meilleurs"),
        ES: ("mejor", "mejores"), PT: ("melhor", "melhores"), IT: ("migliore", "migliori"),
        NL: ("beste",), PL: ("najlepsze", "najlepszy"), TR: ("en iyi",),
    },
    "fastest delivery": {
        ZH: ("最快",), RU: ("самая быстрая доставка", "быстрее всего"), DE: ("schnellste lieferung", "schnellste"),
        FR: ("le plus rapide",), ES: ("más rápido", "entrega más rápida"), PT: ("mais rápido",),
        IT: ("più veloce",), NL: ("snelste",), PL: ("najszybsza dostawa", "najszybciej"), TR: ("en hızlı",),
    },
    "compare": {
        ZH: ("比较", "对比"), JA: ("比較",), KO: ("비교",), RU: ("сравнить", "сравнение"),
        AR: ("قارن", "مقارنة"), DE: ("vergleichen", "vergleich"), FR: ("comparer",),
        ES: ("comparar",), PT: ("comparar",), IT: ("confrontare",), NL: ("vergelijken",),
        PL: ("porównaj", "porównać"), TR: ("karşılaştır",),
    },
    "alternatives": {
        ZH: ("替代品", "替代"), JA: ("代替品",), RU: ("аналоги", "аналог", "замена"),
        AR: ("بدائل", "بديل"), DE: ("alternativen", "ersatzteil für"), FR: ("équivalent", "équivalents"),
        ES: ("alternativas", "equivalente"), PT: ("alternativas",), IT: ("alternative",),
        NL: ("alternatieven",), PL: ("alternatywy",), TR: ("alternatif",),
    },
    "find": {
        ZH: ("查找", "寻找", "找"), JA: ("探す", "検索"), KO: ("찾기", "검색"),
        RU: ("найти", "найди", "ищу", "поиск"), AR: ("أبحث عن", "ابحث", "بحث"),
        DE: ("finden", "suche", "suchen"), FR: ("trouver", "cherche", "chercher"),
        ES: ("buscar", "busco", "encontrar"), PT: ("procurar", "procuro", "encontrar"),
        IT: ("trovare", "cerco", "cercare"), NL: ("zoeken", "zoek", "vinden"),
        PL: ("znajdź", "szukam"), TR: ("bul", "arıyorum"),
    },
    "show": {
        ZH: ("显示", "给我看"), JA: ("見せて",), RU: ("покажи", "показать"), AR: ("اعرض", "أظهر"),
        DE: ("zeige", "zeigen"), FR: ("montrer", "montre-moi"), ES: ("mostrar", "muéstrame"),
        PT: ("mostrar", "mostre"), IT: ("mostra", "mostrami"), NL: ("toon",), PL: ("pokaż",),
        TR: ("göster",),
    },
    "need": {
        ZH: ("需要",), JA: ("必要",), KO: ("필요",), RU: ("нужно", "нужны", "надо"),
        AR: ("أحتاج", "احتاج"), DE: ("brauche", "benötige"), FR: ("besoin de",),
        ES: ("necesito",), PT: ("preciso de", "preciso"), IT: ("ho bisogno di",),
        PL: ("potrzebuję",), TR: ("lazım", "gerekli"),
    },
    "for": {
        ZH: ("适用于", "用于"), RU: ("для",), DE: ("für",), FR: ("pour",), ES: ("para",),
        PT: ("para",), IT: ("per",), NL: ("voor",), TR: ("için",),
    },
    "without": {
        ZH: ("不要", "除了"), JA: ("以外",), RU: ("без", "кроме"), AR: ("بدون", "باستثناء"),
        DE: ("ohne", "außer"), FR: ("sans", "sauf"), ES: ("sin", "excepto"), PT: ("sem", "exceto"),
        IT: ("senza", "tranne"), NL: ("zonder", "behalve"), PL: ("bez", "oprócz"), TR: ("hariç",),
    },
    "made in": {
        ZH: ("产自",), RU: ("произведено в", "сделано в"), DE: ("hergestellt in",),
        FR: ("fabriqué en",), ES: ("fabricado en", "hecho en"), PT: ("fabricado em", "feito em"),
        IT: ("prodotto in", "fatto in"),
    },
    "from": {ZH: ("来自",), RU: ("из",), DE: ("aus",), IT: ("da",), NL: ("uit",), AR: ("من",)},
    # ── Quantity ─────────────────────────────────────────
    "pcs": {
        ZH: ("个", "件", "只"), JA: ("個",), RU: ("штук", "штуки", "шт"), AR: ("قطعة", "قطع"),
        DE: ("stück", "stk"), FR: ("pièces", "unités"), ES: ("piezas", "unidades"),
        PT: ("peças", "unidades"), IT: ("pezzi",), NL: ("stuks",), PL: ("sztuk", "szt"), TR: ("adet",),
    },
    "quantity": {
        ZH: ("数量",), JA: ("数量",), RU: ("количество",), AR: ("كمية", "الكمية"),
        DE: ("menge", "anzahl"), FR: ("quantité",), ES: ("cantidad",), PT: ("quantidade",),
        IT: ("quantità",), NL: ("aantal",), PL: ("ilość",), TR: ("miktar",),
    },
    "wholesale": {
        ZH: ("批发",), RU: ("оптом", "опт"), AR: ("بالجملة", "جملة"), DE: ("großhandel",),
        FR: ("en gros",), ES: ("al por mayor", "mayorista"), PT: ("atacado",),
        IT: ("all'ingrosso",), PL: ("hurtowo", "hurt"), TR: ("toptan",),
    },
    # ── Currency words ───────────────────────────────────
    "usd": {ZH: ("美元",), JA: ("ドル",), KO: ("달러",), RU: ("долларов", "доллар", "доллара"), AR: ("دولار",)},
    "eur": {ZH: ("欧元",), RU: ("евро",), AR: ("يورو",)},
    "cny": {ZH: ("人民币", "元", "块")},
    "jpy": {ZH: ("日元",), JA: ("円",)},
    "rub": {RU: ("рублей", "рубля", "рубль", "руб")},
    "aed": {AR: ("درهم", "دراهم")},
    "sar": {AR: ("ريال",)},
    "lira": {TR: ("lira", "tl")},
    "zloty": {PL: ("zł", "złotych", "zlotych")},
    "brl": {PT: ("reais",)},
    # ── Categories ───────────────────────────────────────
    "brake pads": {
        ZH: ("刹车片", "制动片"), JA: ("ブレーキパッド",), KO: ("브레이크 패드", "브레이크패드"),
        RU: ("тормозные колодки", "колодки"), AR: ("فحمات الفرامل", "تيل فرامل"),
        DE: ("bremsbeläge", "bremsbelag"), FR: ("plaquettes de frein", "plaquettes"),
        ES: ("pastillas de freno", "pastillas"), PT: ("pastilhas de freio", "pastilhas"),
        IT: ("pastiglie dei freni", "pastiglie freno", "pastiglie"), NL: ("remblokken",),
        PL: ("klocki hamulcowe",), TR: ("fren balatası", "balata"),
    },
    "brake disc": {
        ZH: ("刹车盘",), JA: ("ブレーキディスク",), RU: ("тормозные диски", "тормозной диск"),
        DE: ("bremsscheiben", "bremsscheibe"), FR: ("disque de frein", "disques de frein"),
        ES: ("disco de freno", "discos de freno"), PT: ("disco de freio",), IT: ("disco freno",),
        NL: ("remschijven", "remschijf"), PL: ("tarcze hamulcowe", "tarcza hamulcowa"), TR: ("fren diski",),
    },
    "brake": {
        ZH: ("刹车", "制动器"), JA: ("ブレーキ",), KO: ("브레이크",), RU: ("тормоза", "тормоз"),
        AR: ("فرامل", "الفرامل"), DE: ("bremsen", "bremse"), FR: ("freins", "frein"),
        ES: ("frenos", "freno"), PT: ("freios", "freio"), IT: ("freni", "freno"),
        NL: ("remmen", "rem"), PL: ("hamulce", "hamulec"), TR: ("fren",),
    },
    "oil filter": {
        ZH: ("机油滤清器", "机滤"), JA: ("オイルフィルター",), KO: ("오일 필터",), RU: ("масляный фильтр",),
        AR: ("فلتر زيت",), DE: ("ölfilter",), FR: ("filtre à huile",), ES: ("filtro de aceite",),
        PT: ("filtro de óleo",), IT: ("filtro olio", "filtro dell'olio"), NL: ("oliefilter",),
        PL: ("filtr oleju",), TR: ("yağ filtresi",),
    },
    "air filter": {
        ZH: ("空气滤清器", "空滤"), JA: ("エアフィルター",), KO: ("에어 필터",), RU: ("воздушный фильтр",),
        AR: ("فلتر هواء",), DE: ("luftfilter",), FR: ("filtre à air",), ES: ("filtro de aire",),
        PT: ("filtro de ar",), IT: ("filtro aria",), NL: ("luchtfilter",), PL: ("filtr powietrza",),
        TR: ("hava filtresi",),
    },
    "filter": {
        ZH: ("滤清器", "滤芯"), JA: ("フィルター",), KO: ("필터",), RU: ("фильтры", "фильтр"),
        AR: ("فلتر", "مرشح"), FR: ("filtres", "filtre"), ES: ("filtros", "filtro"),
        PT: ("filtros", "filtro"), IT: ("filtri", "filtro"), PL: ("filtry", "filtr"), TR: ("filtre",),
    },
    "spark plug": {
        ZH: ("火花塞",), JA: ("スパークプラグ",), KO: ("점화 플러그",), RU: ("свечи зажигания", "свеча зажигания"),
        AR: ("بواجي", "شمعات الإشعال"), DE: ("zündkerzen", "zündkerze"), FR: ("bougies d'allumage", "bougie d'allumage"),
        ES: ("bujías", "bujía"), PT: ("velas de ignição", "vela de ignição"), IT: ("candele", "candela"),
        NL: ("bougies", "bougie"), PL: ("świece zapłonowe", "świeca zapłonowa"), TR: ("buji",),
    },
    "battery": {
        ZH: ("蓄电池", "电池"), JA: ("バッテリー",), KO: ("배터리",), RU: ("аккумулятор",),
        AR: ("بطارية",), DE: ("batterie",), FR: ("batterie",), ES: ("batería",), PT: ("bateria",),
        IT: ("batteria",), NL: ("accu",), PL: ("akumulator",), TR: ("akü",),
    },
    "bearing": {
        ZH: ("轴承",), JA: ("ベアリング",), KO: ("베어링",), RU: ("подшипники", "подшипник"),
        AR: ("رولمان", "محمل"), DE: ("radlager", "lager"), FR: ("roulement", "roulements"),
        ES: ("rodamiento", "cojinete"), PT: ("rolamento",), IT: ("cuscinetto",), NL: ("lager",),
        PL: ("łożysko",), TR: ("rulman",),
    },
    "shock absorber": {
        ZH: ("减震器", "避震器"), JA: ("ショックアブソーバー",), KO: ("쇼크 업소버",),
        RU: ("амортизаторы", "амортизатор"), AR: ("ممتص الصدمات", "مساعدات"),
        DE: ("stoßdämpfer",), FR: ("amortisseurs", "amortisseur"), ES: ("amortiguadores", "amortiguador"),
        PT: ("amortecedores", "amortecedor"), IT: ("ammortizzatori", "ammortizzatore"),
        NL: ("schokdempers", "schokdemper"), PL: ("amortyzatory", "amortyzator"), TR: ("amortisör",),
    },
    "clutch": {
        ZH: ("离合器",), JA: ("クラッチ",), KO: ("클러치",), RU: ("сцепление",), AR: ("كلتش", "قابض"),
        DE: ("kupplung",), FR: ("embrayage",), ES: ("embrague",), PT: ("embreagem",),
        IT: ("frizione",), NL: ("koppeling",), PL: ("sprzęgło",), TR: ("debriyaj",),
    },
    "radiator": {
        ZH: ("散热器", "水箱"), JA: ("ラジエーター",), KO: ("라디에이터",), RU: ("радиатор",),
        AR: ("رادياتير",), DE: ("kühler",), FR: ("radiateur",), ES: ("radiador",), PT: ("radiador",),
        IT: ("radiatore",), PL: ("chłodnica",), TR: ("radyatör",),
    },
    "water pump": {
        ZH: ("水泵",), JA: ("ウォーターポンプ",), KO: ("워터 펌프",), RU: ("водяной насос", "помпа"),
        AR: ("طرمبة ماء",), DE: ("wasserpumpe",), FR: ("pompe à eau",), ES: ("bomba de agua",),
        PT: ("bomba d'água",), IT: ("pompa dell'acqua",), NL: ("waterpomp",), PL: ("pompa wody",),
        TR: ("su pompası",),
    },
    "alternator": {
        ZH: ("发电机",), JA: ("オルタネーター",), KO: ("발전기",), RU: ("генератор",), AR: ("دينامو",),
        DE: ("lichtmaschine",), FR: ("alternateur",), ES: ("alternador",), PT: ("alternador",),
        IT: ("alternatore",), NL: ("dynamo",), TR: ("alternatör", "şarj dinamosu"),
    },
    "starter": {
        ZH: ("启动机", "起动机"), JA: ("スターター",), RU: ("стартер",), AR: ("سلف",),
        DE: ("anlasser",), FR: ("démarreur",), ES: ("motor de arranque",), PT: ("motor de partida",),
        IT: ("motorino di avviamento",), NL: ("startmotor",), PL: ("rozrusznik",), TR: ("marş motoru",),
    },
    "timing belt": {
        ZH: ("正时皮带",), JA: ("タイミングベルト",), RU: ("ремень грм",), DE: ("zahnriemen",),
        FR: ("courroie de distribution",), ES: ("correa de distribución",), PT: ("correia dentada",),
        IT: ("cinghia di distribuzione",), NL: ("distributieriem",), PL: ("pasek rozrządu",),
        TR: ("triger kayışı",),
    },
    "belt": {
        ZH: ("皮带",), JA: ("ベルト",), RU: ("ремень",), AR: ("سير",), DE: ("keilriemen", "riemen"),
        FR: ("courroie",), ES: ("correa",), PT: ("correia",), IT: ("cinghia",), NL: ("riem",),
        PL: ("pasek",), TR: ("kayış",),
    },
    "headlight": {
        ZH: ("大灯", "前灯"), JA: ("ヘッドライト",), RU: ("фары", "фара"), AR: ("كشاف",),
        DE: ("scheinwerfer",), FR: ("phares", "phare"), ES: ("faros", "faro"), PT: ("faróis", "farol"),
        IT: ("fari", "faro"), NL: ("koplamp",), PL: ("reflektor",), TR: ("far",),
    },
    "sensor": {
        ZH: ("传感器",), JA: ("センサー",), KO: ("센서",), RU: ("датчик",), AR: ("حساس",),
        FR: ("capteur",), IT: ("sensore",), PL: ("czujnik",), TR: ("sensör",),
    },
    "gasket": {
        ZH: ("垫片", "密封垫"), JA: ("ガスケット",), RU: ("прокладка",), AR: ("جوان",),
        DE: ("dichtung",), FR: ("joint",), ES: ("junta",), PT: ("junta",), IT: ("guarnizione",),
        NL: ("pakking",), PL: ("uszczelka",), TR: ("conta",),
    },
    "exhaust": {
        ZH: ("排气",), RU: ("выхлоп", "глушитель"), DE: ("auspuff",), FR: ("échappement",),
        ES: ("escape",), PT: ("escapamento",), IT: ("scarico",), NL: ("uitlaat",), PL: ("wydech",),
        TR: ("egzoz",),
    },
    "engine": {
        ZH: ("发动机",), JA: ("エンジン",), KO: ("엔진",), RU: ("двигатель", "мотор"),
        AR: ("محرك", "مكينة"), DE: ("motor",), FR: ("moteur",), ES: ("motor",), PT: ("motor",),
        IT: ("motore",), NL: ("motor",), PL: ("silnik",), TR: ("motor",),
    },
    "suspension": {
        ZH: ("悬挂",), RU: ("подвеска",), DE: ("fahrwerk",), ES: ("suspensión",), PT: ("suspensão",),
        IT: ("sospensione",), NL: ("vering",), PL: ("zawieszenie",), TR: ("süspansiyon",),
    },
    "transmission": {
        ZH: ("变速箱",), RU: ("коробка передач", "кпп"), DE: ("getriebe",), FR: ("boîte de vitesses",),
        ES: ("caja de cambios", "transmisión"), PT: ("câmbio",), IT: ("cambio",),
        NL: ("versnellingsbak",), PL: ("skrzynia biegów",), TR: ("şanzıman",),
    },
    "fuel pump": {
        ZH: ("燃油泵",), RU: ("топливный насос",), DE: ("kraftstoffpumpe",), FR: ("pompe à carburant",),
        ES: ("bomba de combustible",), PT: ("bomba de combustível",), IT: ("pompa carburante",),
        PL: ("pompa paliwa",), TR: ("yakıt pompası",),
    },
    "wiper": {
        ZH: ("雨刷", "雨刮"), JA: ("ワイパー",), KO: ("와이퍼",), RU: ("дворники",),
        DE: ("scheibenwischer",), FR: ("essuie-glace",), ES: ("limpiaparabrisas",),
        PT: ("limpador",), IT: ("tergicristallo",), NL: ("ruitenwisser",), PL: ("wycieraczki",),
        TR: ("silecek",),
    },
    "tire": {
        ZH: ("轮胎",), JA: ("タイヤ",), KO: ("타이어",), RU: ("шины", "шина"), AR: ("إطارات", "اطارات"),
        DE: ("reifen",), FR: ("pneus", "pneu"), ES: ("neumáticos", "neumático", "llantas"),
        PT: ("pneus", "pneu"), IT: ("pneumatici", "gomme"), NL: ("banden",), PL: ("opony",),
        TR: ("lastik",),
    },
    # ── Origins ──────────────────────────────────────────
    "german": {
        ZH: ("德国",), JA: ("ドイツ",), KO: ("독일",), RU: ("немецкие", "немецкий", "германия"),
        AR: ("ألماني", "ألمانيا"), DE: ("deutsche", "deutsch", "deutschland"),
        FR: ("allemand", "allemande", "allemagne"), ES: ("alemán", "alemana", "alemania"),
        PT: ("alemão", "alemanha"), IT: ("tedesco", "tedeschi", "germania"), NL: ("duits", "duitsland"),
        PL: ("niemieckie", "niemcy"), TR: ("alman", "almanya"),
    },
    "japanese": {
        ZH: ("日本",), KO: ("일본",), RU: ("японские", "японский", "япония"), AR: ("ياباني", "اليابان"),
        DE: ("japanisch", "japanische"), FR: ("japonais",), ES: ("japonés", "japón"),
        PT: ("japonês", "japão"), IT: ("giapponese",), PL: ("japońskie",), TR: ("japon",),
    },
    "made in japan": {JA: ("日本製",)},
    "chinese": {
        ZH: ("中国", "国产"), KO: ("중국",), RU: ("китайские", "китайский", "китай"), AR: ("صيني", "الصين"),
        DE: ("chinesisch", "chinesische"), FR: ("chinois",), ES: ("chino", "china"),
        PT: ("chinês",), IT: ("cinese",), PL: ("chińskie",), TR: ("çin",),
    },
    "made in china": {JA: ("中国製",)},
    "korean": {ZH: ("韩国",), JA: ("韓国",), RU: ("корейские", "корея"), AR: ("كوري",), DE: ("koreanisch",), TR: ("kore",)},
    "american": {ZH: ("美国",), JA: ("アメリカ",), RU: ("американские",), AR: ("أمريكي",), DE: ("amerikanisch",), TR: ("amerikan",)},
    "italian": {ZH: ("意大利",), RU: ("итальянские",), DE: ("italienisch",), FR: ("italien",), ES: ("italiano",), IT: ("italiano", "italiani")},
    "turkish": {ZH: ("土耳其",), RU: ("турецкие",), AR: ("تركي",), DE: ("türkisch",), TR: ("türk", "yerli")},
    "french": {ZH: ("法国",), RU: ("французские",), DE: ("französisch",), FR: ("français", "française")},
    # ── Fuel / vehicle types ─────────────────────────────
    "diesel": {ZH: ("柴油",), JA: ("ディーゼル",), RU: ("дизельный", "дизель"), AR: ("ديزل",), ES: ("diésel",), FR: ("gazole",), TR: ("dizel",)},
    "petrol": {ZH: ("汽油",), JA: ("ガソリン",), RU: ("бензиновый", "бензин"), AR: ("بنزين",), FR: ("essence",), ES: ("gasolina",), PT: ("gasolina",), IT: ("benzina",), TR: ("benzinli",)},
    "hybrid": {ZH: ("混动", "混合动力"), JA: ("ハイブリッド",), RU: ("гибрид",), DE: ("hybride",), ES: ("híbrido",)},
    "electric": {ZH: ("电动",), RU: ("электрический", "электро"), DE: ("elektrisch",), FR: ("électrique",), ES: ("eléctrico",), IT: ("elettrico",)},
    "truck": {
        ZH: ("卡车", "货车"), JA: ("トラック",), RU: ("грузовик", "грузовой"), AR: ("شاحنة",), DE: ("lkw",),
        FR: ("camion",), ES: ("camión",), PT: ("caminhão",), IT: ("camion",), NL: ("vrachtwagen",),
        PL: ("ciężarówka",), TR: ("kamyon",),
    },
    "car": {
        ZH: ("汽车", "轿车"), JA: ("自動車",), RU: ("автомобиль", "машина", "легковой"), AR: ("سيارة",),
        DE: ("pkw", "auto"), FR: ("voiture",), ES: ("coche", "carro"), PT: ("carro",),
        IT: ("macchina",), PL: ("samochód",), TR: ("araba",),
    },
    "suv": {RU: ("внедорожник",), DE: ("geländewagen",), ZH: ("越野车",)},
    "motorcycle": {ZH: ("摩托车",), JA: ("バイク",), RU: ("мотоцикл",), DE: ("motorrad",), FR: ("moto",), ES: ("motocicleta", "moto"), TR: ("motosiklet",)},
    "bus": {ZH: ("公交车", "客车"), RU: ("автобус",), TR: ("otobüs",)},
    "tractor": {ZH: ("拖拉机",), RU: ("трактор",), DE: ("traktor",), FR: ("tracteur",), TR: ("traktör",)},
}


# =============================================================================
# TYPO CORRECTIONS (whole-word, all languages)
# =============================================================================
TYPO_CORRECTIONS = {
    # Vehicle makes
    "toyta": "toyota", "toyoya": "toyota", "tayota": "toyota", "toyata": "toyota",
    "hundai": "hyundai", "hyundia": "hyundai", "hyndai": "hyundai",
    "nisan": "nissan", "nissn": "nissan",
    "mercedez": "mercedes", "merceds": "mercedes", "merceeds": "mercedes", "mersedes": "mercedes",
    "bmv": "bmw",
    "volkswagon": "volkswagen", "volkswagan": "volkswagen", "wolkswagen": "volkswagen",
    "porche": "porsche", "porshe": "porsche", "porchhe": "porsche",
    "cheverolet": "chevrolet", "chevrolete": "chevrolet",
    "mitsubishy": "mitsubishi", "mitsubichi": "mitsubishi",
    "suzuky": "suzuki", "lamborgini": "lamborghini", "ferarri": "ferrari",
    "peugot": "peugeot", "renualt": "renault", "mazada": "mazda",
    "subaro": "subaru", "lexsus": "lexus",
    # Parts manufacturers
    "bosh": "bosch", "bosc": "bosch", "bosche": "bosch",
    "bremb": "brembo", "brembro": "brembo",
    "denzo": "denso", "valio": "valeo", "delfi": "delphi",
    "mahl": "mahle", "bilstien": "bilstein", "monro": "monroe",
    "timkin": "timken", "akebno": "akebono", "acdelko": "acdelco",
    "motorcraf": "motorcraft",
    # Domain vocabulary
    "filtr": "filter", "fliter": "filter", "filtter": "filter", "fitler": "filter",
    "break": "brake", "breaks": "brakes", "brak": "brake", "brakepads": "brake pads",
    "spak": "spark", "sparkplug": "spark plug", "sparkplugs": "spark plugs",
    "alternater": "alternator", "alterntor": "alternator",
    "radiater": "radiator", "radiatior": "radiator",
    "suspention": "suspension", "suspenion": "suspension",
    "transmision": "transmission", "tranmission": "transmission",
    "bearign": "bearing", "baering": "bearing",
    "gaskit": "gasket", "clucth": "clutch", "cluth": "clutch",
    "absorbor": "absorber", "shok": "shock",
    "exaust": "exhaust", "exhuast": "exhaust",
    "sensr": "sensor", "senser": "sensor",
    "batery": "battery", "battary": "battery", "baterry": "battery",
    "injecter": "injector", "thermostate": "thermostat",
    "warrenty": "warranty", "waranty": "warranty", "warrantee": "warranty",
    "delivary": "delivery", "delivey": "delivery", "dilivery": "delivery",
    "delievery": "delivery", "deliverry": "delivery", "devlivery": "delivery",
    "shiping": "shipping",
    "quanity": "quantity", "quantiy": "quantity", "qunatity": "quantity",
    "availabe": "available", "avaialble": "available", "avalable": "available",
    "stok": "stock", "chep": "cheap", "cheep": "cheap",
    "cheapst": "cheapest", "cheapes": "cheapest",
    "pirce": "price", "prcie": "price", "prise": "price",
    "genuin": "genuine", "geniune": "genuine",
    "orignal": "original", "origional": "original",
    "aftermarkt": "aftermarket", "suplier": "supplier", "supplyer": "supplier",
    "expres": "express", "urgant": "urgent", "compair": "compare",
    "alternitive": "alternative", "alternitives": "alternatives",
}
