"""
Multilingual keyword dictionary used by the category scorer.

Category order is significant: when two categories reach the same score
the one declared first wins. Keywords are normalized with the same
normalizer applied to article text, so zero-width joiners inside
Indic keywords do not prevent matches.
"""

from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple
from news_portal.classification.normalizer import normalize_text

# Keyword dictionary type: category -> keywords, in declaration order
KeywordDictionary = Mapping[str, Tuple[str, ...]]

CATEGORY_ORDER = (
  "politics",
  "sports",
  "entertainment",
  "technology",
  "health",
  "business",
  "education",
  "crime",
)

_RAW_KEYWORDS: Dict[str, Tuple[str, ...]] = {
  "politics": (
    # English
    'politics', 'political', 'election', 'elections', 'minister', 'government', 'parliament', 'assembly', 'mla', 'mp', 'party', 'pm', 'president', 'congress', 'bjp', 'tdp', 'ysr', 'trs', 'aap', 'cabinet', 'opposition', 'vote', 'voting', 'campaign',
    # Telugu
    'రాజకీయ', 'రాజకీయం', 'రాజకీయాలు', 'రాజకీయాల', 'రాజకీయాల్లో', 'రాజకీయ నేత', 'రాజకీయ నేతలు', 'ఎన్నిక', 'ఎన్నికలు', 'ఎన్నికల్లో', 'మంత్రి', 'ప్రభుత్వ', 'సభ', 'సభ్యుడు', 'సభ్యులు', 'అసెంబ్లీ', 'శాసనసభ', 'లోక్\u200cసభ', 'రాజ్యసభ', 'పార్టీ', 'ముఖ్యమంత్రి', 'అధ్యక్షుడు', 'ఎంపీ', 'ఎంఎల్ఏ', 'నేత', 'నాయకుడు', 'ప్రతిపక్షం', 'ఓటు', 'ఓటింగ్', 'క్యాబినెట్',
    # Tamil
    'ராஜகியம்', 'ராஜகிய', 'தேர்தல்', 'அரசு', 'மந்திரி', 'பாராளுமன்றம்', 'சட்டமன்றம்', 'கட்சி', 'பிரதமர்', 'எம்எல்ஏ', 'எம்பி', 'எதிர்க்கட்சிகள்', 'வாக்கு', 'வாக்குப்பதிவு',
    # Hindi
    'राजनीति', 'चुनाव', 'मंत्री', 'सरकार', 'संसद', 'विधानसभा', 'पार्टी', 'मुख्यमंत्री', 'राष्ट्रपति', 'सांसद', 'विधायक', 'नेता', 'विपक्ष', 'मतदान', 'अभियान',
    # Bengali
    'রাজনীতি', 'নির্বাচন', 'মন্ত্রী', 'সরকার', 'সংসদ', 'বিধানসভা', 'দল', 'মুখ্যমন্ত্রী', 'রাষ্ট্রপতি', 'সাংসদ', 'বিধায়ক', 'নেতা', 'বিরোধী', 'ভোট', 'প্রচার',
    # Gujarati
    'રાજકારણ', 'ચૂંટણી', 'મંત્રી', 'સરકાર', 'સંસદ', 'વિધાનસભા', 'પક્ષ', 'મુખ્યમંત્રી', 'રાષ્ટ્રપતિ', 'સાંસદ', 'વિધાયક', 'નેતા', 'વિરોધી', 'મતદાન', 'અભિયાન',
    # Marathi
    'राजकारण', 'निवडणूक', 'मंत्री', 'सरकार', 'संसद', 'विधानसभा', 'पक्ष', 'मुख्यमंत्री', 'राष्ट्रपती', 'खासदार', 'आमदार', 'नेता', 'विरोधी', 'मतदान', 'मोहीम',
  ),
  "sports": (
    # English
    'sports', 'sport', 'cricket', 'football', 'soccer', 'tennis', 'badminton', 'hockey', 'ipl', 'match', 'player', 'tournament', 'score', 'goal', 'winner', 'loser', 'series', 'league', 'cup',
    # Telugu (include common inflections)
    'క్రీడ', 'క్రీడలు', 'క్రీడల', 'క్రీడలలో', 'ఆట', 'ఆటలు', 'మ్యాచ్', 'మ్యాచ్\u200cలు', 'మ్యాచులు', 'ఫలితాలు', 'జట్టు', 'జట్లు', 'జట్టులో', 'ప్లేయర్', 'ప్లేయర్లు', 'ఆటగాడు', 'ఆటగాళ్లు', 'విజయం', 'ఓటమి', 'ర్యాంకింగ్', 'సిరీస్', 'లీగ్', 'కప్', 'క్రికెట్', 'ఫుట్బాల్', 'టెన్నిస్', 'బ్యాడ్మింటన్', 'హాకీ',
    # Tamil
    'விளையாட்டு', 'விளையாட்டுகள்', 'கிரிக்கெட்', 'கால்பந்து', 'டென்னிஸ்', 'பேட்மிண்டன்', 'ஹாக்கி', 'போட்டி', 'மேட்ச்', 'அணி', 'வீரர்', 'ஸ்கோர்', 'லீக்', 'கப்',
    # Hindi
    'खेल', 'क्रिकेट', 'फुटबॉल', 'टेनिस', 'बैडमिंटन', 'हॉकी', 'मैच', 'खिलाड़ी', 'टूर्नामेंट', 'स्कोर', 'गोल', 'विजेता', 'हारनेवाला', 'सीरीज', 'लीग', 'कप',
    # Bengali
    'খেলা', 'ক্রিকেট', 'ফুটবল', 'টেনিস', 'ব্যাডমিন্টন', 'হকি', 'ম্যাচ', 'খেলোয়াড়', 'টুর্নামেন্ট', 'স্কোর', 'গোল', 'বিজয়ী', 'পরাজিত', 'সিরিজ', 'লিগ', 'কাপ',
    # Gujarati
    'રમત', 'ક્રિકેટ', 'ફુટબોલ', 'ટેનિસ', 'બેડમિન્ટન', 'હોકી', 'મેચ', 'રમતવીર', 'ટુર્નામેન્ટ', 'સ્કોર', 'ગોલ', 'વિજેતા', 'હારનાર', 'સિરિઝ', 'લીગ', 'કપ',
    # Marathi
    'खेळ', 'क्रिकेट', 'फुटबॉल', 'टेनिस', 'बॅडमिंटन', 'हॉकी', 'सामना', 'खेळाडू', 'स्पर्धा', 'गोल', 'विजेता', 'हरलेला', 'मालिका', 'लीग', 'कप',
  ),
  "entertainment": (
    # English
    'entertainment', 'movie', 'movies', 'film', 'cinema', 'actor', 'actress', 'director', 'trailer', 'song', 'review', 'bollywood', 'tollywood', 'kollywood', 'box office',
    # Telugu
    'సినిమా', 'చిత్రం', 'చలనచిత్రం', 'నటుడు', 'నటి', 'హీరో', 'హీరోయిన్', 'దర్శకుడు', 'ట్రైలర్', 'పాట', 'సాంగ్', 'సమీక్ష', 'రివ్యూ', 'బాక్సాఫీస్', 'బాక్స్ ఆఫీస్', 'టాలీవుడ్', 'బాలీవుడ్', 'కోలీవుడ్', 'వెబ్ సిరీస్', 'సీరియల్',
    # Tamil
    'பொழுதுபோக்கு', 'திரைப்படம்', 'சினிமா', 'நடிகர்', 'நடிகை', 'இயக்குனர்', 'டிரைலர்', 'பாடல்', 'விமர்சனம்', 'பாக்ஸ் ஆபிஸ்', 'காலிவுட்', 'கொலிவுட்', 'தொலைக்காட்சி',
    # Hindi
    'मनोरंजन', 'फिल्म', 'सिनेमा', 'अभिनेता', 'अभिनेत्री', 'निर्देशक', 'ट्रेलर', 'गाना', 'समीक्षा', 'बॉलीवुड', 'टॉलीवुड', 'कोलीवुड', 'बॉक्स ऑफिस',
    # Bengali
    'বিনোদন', 'চলচ্চিত্র', 'সিনেমা', 'অভিনেতা', 'অভিনেত্রী', 'পরিচালক', 'ট্রেইলার', 'গান', 'সমালোচনা', 'বলিউড', 'টলিউড', 'কলিউড', 'বক্স অফিস',
    # Gujarati
    'મનોરંજન', 'ફિલ્મ', 'સિનેમા', 'અભિનેતા', 'અભિનેત્રી', 'દિગ્દર્શક', 'ટ્રેલર', 'ગીત', 'સમીક્ષા', 'બોલીવુડ', 'ટોલીવુડ', 'કોલીવુડ', 'બોક્સ ઓફિસ',
    # Marathi
    'मनोरंजन', 'चित्रपट', 'सिनेमा', 'अभिनेता', 'अभिनेत्री', 'दिग्दर्शक', 'ट्रेलर', 'गाणे', 'समीक्षा', 'बॉलिवूड', 'टॉलिवूड', 'कोलिवूड', 'बॉक्स ऑफिस',
  ),
  "technology": (
    # English
    'technology', 'tech', 'gadget', 'smartphone', 'mobile', 'ai', 'artificial intelligence', 'software', 'internet', 'robot', 'startup', 'app', 'update', 'chip', 'semiconductor',
    # Telugu
    'టెక్నాలజీ', 'సాంకేతికం', 'సాంకేతిక', 'గాడ్జెట్', 'మొబైల్', 'స్మార్ట్\u200cఫోన్', 'కృత్రిమ మేధస్సు', 'ఎఐ', 'సాఫ్ట్\u200cవేర్', 'ఇంటర్నెట్', 'రోబోట్', 'స్టార్టప్', 'యాప్', 'అప్డేట్', 'చిప్',
    # Tamil
    'தொழில்நுட்பம்', 'டெக்', 'கேட்ஜெட்', 'ஸ்மார்ட்போன்', 'மொபைல்', 'கணினி', 'மென்பொருள்', 'இணையம்', 'ரோபோட்', 'ஸ்டார்ட்அப்', 'சிப்', 'புதுப்பிப்பு',
    # Hindi
    'तकनीक', 'गैजेट', 'स्मार्टफोन', 'मोबाइल', 'कृत्रिम बुद्धिमत्ता', 'सॉफ्टवेयर', 'इंटरनेट', 'रोबोट', 'स्टार्टअप', 'ऐप', 'अपडेट', 'चिप',
    # Bengali
    'প্রযুক্তি', 'গ্যাজেট', 'স্মার্টফোন', 'মোবাইল', 'কৃত্রিম বুদ্ধিমত্তা', 'সফটওয়্যার', 'ইন্টারনেট', 'রোবট', 'স্টার্টআপ', 'অ্যাপ', 'আপডেট', 'চিপ',
    # Gujarati
    'ટેકનોલોજી', 'ગેજેટ', 'સ્માર્ટફોન', 'મોબાઇલ', 'કૃત્રિમ બુદ્ધિ', 'સોફ્ટવેર', 'ઇન્ટરનેટ', 'રોબોટ', 'સ્ટાર્ટઅપ', 'એપ', 'અપડેટ', 'ચિપ',
    # Marathi
    'तंत्रज्ञान', 'गॅजेट', 'स्मार्टफोन', 'मोबाइल', 'कृत्रिम बुद्धिमत्ता', 'सॉफ्टवेअर', 'इंटरनेट', 'रोबोट', 'स्टार्टअप', 'अॅप', 'अपडेट', 'चिप',
  ),
  "health": (
    # English
    'health', 'hospital', 'doctor', 'covid', 'vaccine', 'medical', 'fitness', 'disease', 'therapy', 'treatment', 'medicine',
    # Telugu
    'ఆరోగ్యం', 'ఆరోగ్య', 'ఆసుపత్రి', 'హాస్పిటల్', 'డాక్టర్', 'వ్యాక్సిన్', 'టీకా', 'వైద్యం', 'వ్యాధి', 'జబ్బు', 'చికిత్స', 'ఔషధం', 'ఫిట్\u200cనెస్',
    # Tamil
    'ஆரோக்கியம்', 'மருத்துவமனை', 'டாக்டர்', 'தடுப்பூசி', 'மருத்துவம்', 'நோய்', 'சிகிச்சை', 'மருந்து',
    # Hindi
    'स्वास्थ्य', 'अस्पताल', 'डॉक्टर', 'कोविड', 'टीका', 'चिकित्सा', 'फिटनेस', 'बीमारी', 'उपचार', 'दवा',
    # Bengali
    'স্বাস্থ্য', 'হাসপাতাল', 'ডাক্তার', 'কোভিড', 'টিকা', 'চিকিৎসা', 'ফিটনেস', 'রোগ', 'চিকিৎসা', 'ঔষধ',
    # Gujarati
    'સ્વાસ્થ્ય', 'હોસ્પિટલ', 'ડૉક્ટર', 'કોવિડ', 'વેક્સિન', 'દવા', 'ફિટનેસ', 'રોગ', 'ઉપચાર', 'દવા',
    # Marathi
    'आरोग्य', 'दवाखाना', 'डॉक्टर', 'कोविड', 'लस', 'वैद्यकीय', 'फिटनेस', 'रोग', 'उपचार', 'औषध',
  ),
  "business": (
    # English
    'business', 'market', 'stock', 'share', 'company', 'finance', 'banking', 'economy', 'revenue', 'profit', 'startup', 'funding',
    # Telugu
    'వ్యాపారం', 'వ్యాపార', 'వ్యాపారవేత్త', 'వ్యాపారవేత్తలు', 'మార్కెట్', 'మార్కెట్లలో', 'స్టాక్', 'షేర్', 'షేర్లు', 'కంపెనీ', 'ఫైనాన్స్', 'బ్యాంకింగ్', 'ఆర్థిక', 'ద్రవ్యోల్బణం', 'ఆదాయం', 'లాభం', 'నష్టం', 'నష్టాలు',
    # Tamil
    'வணிகம்', 'சந்தை', 'பங்கு', 'நிறுவனம்', 'நிதி', 'வங்கி', 'பொருளாதாரம்', 'வருவாய்', 'லாபம்', 'நஷ்டம்', 'நிதியுதவி',
    # Hindi
    'व्यापार', 'बाजार', 'शेयर', 'कंपनी', 'वित्त', 'बैंकिंग', 'अर्थव्यवस्था', 'राजस्व', 'लाभ', 'स्टार्टअप', 'निधि',
    # Bengali
    'ব্যবসা', 'বাজার', 'শেয়ার', 'কোম্পানি', 'অর্থ', 'ব্যাংকিং', 'অর্থনীতি', 'রাজস্ব', 'লাভ', 'স্টার্টআপ', 'তহবিল',
    # Gujarati
    'વ્યવસાય', 'બજાર', 'શેર', 'કંપની', 'ફાઇનાન્સ', 'બેંકિંગ', 'અર્થતંત્ર', 'રાજસ્વ', 'લાભ', 'સ્ટાર્ટઅપ', 'ફંડિંગ',
    # Marathi
    'व्यवसाय', 'बाजार', 'शेअर', 'कंपनी', 'वित्त', 'बँकिंग', 'अर्थव्यवस्था', 'राजस्व', 'नफा', 'स्टार्टअप', 'निधी',
  ),
  "education": (
    # English
    'education', 'exam', 'results', 'student', 'school', 'college', 'university', 'admission', 'scholarship',
    # Telugu
    'విద్య', 'పరీక్ష', 'ఫలితాలు', 'విద్యార్థి', 'పాఠశాల', 'కళాశాల', 'విశ్వవిద్యాలయం', 'దాఖలాలు', 'వేతనం',
    # Tamil
    'கல்வி', 'தேர்வு', 'முடிவுகள்', 'மாணவர்', 'பள்ளி', 'கல்லூரி', 'பல்கலைக்கழகம்', 'சேர்க்கை', 'உதவித்தொகை',
    # Hindi
    'शिक्षा', 'परीक्षा', 'परिणाम', 'छात्र', 'स्कूल', 'कॉलेज', 'विश्वविद्यालय', 'प्रवेश', 'छात्रवृत्ति',
    # Bengali
    'শিক্ষা', 'পরীক্ষা', 'ফলাফল', 'ছাত্র', 'স্কুল', 'কলেজ', 'বিশ্ববিদ্যালয়', 'ভর্তি', 'বৃত্তি',
    # Gujarati
    'શિક્ષણ', 'પરીક્ષા', 'પરિણામ', 'વિદ્યાર્થી', 'શાળા', 'કોલેજ', 'યુનિવર્સિટી', 'પ્રવેશ', 'છાત્રવૃત્તિ',
    # Marathi
    'शिक्षण', 'परीक्षा', 'निकाल', 'विद्यार्थी', 'शाळा', 'कॉलेज', 'विश्वविद्यालय', 'प्रवेश', 'शिष्यवृत्ती',
  ),
  "crime": (
    # English
    'crime', 'police', 'murder', 'theft', 'robbery', 'scam', 'fraud', 'arrest', 'assault', 'violence',
    # Telugu
    'క్రైమ్', 'నేరం', 'నేరాలు', 'పోలీసు', 'హత్య', 'హత్యలు', 'దొంగతనం', 'దొంగతనాలు', 'దొంగలు', 'దోపిడీ', 'మోసం', 'అరెస్ట్', 'అరెస్టు', 'కోర్టు', 'కోర్టులో', 'దాడి', 'హింస', 'నేరస్థుడు', 'నేరస్థులు',
    # Tamil
    'குற்றம்', 'காவல்துறை', 'கொலை', 'திருட்டு', 'கொள்ளை', 'மோசடி', 'கைது', 'தாக்குதல்', 'வன்முறை',
    # Hindi
    'अपराध', 'पुलिस', 'हत्या', 'चोरी', 'डकैती', 'घोटाला', 'धोखाधड़ी', 'गिरफ्तारी', 'हमला', 'हिंसा',
    # Bengali
    'অপরাধ', 'পুলিশ', 'খুন', 'চুরি', 'ডাকাতি', 'কেলেঙ্কারি', 'জালিয়াতি', 'গ্রেফতার', 'আক্রমণ', 'সহিংসতা',
    # Gujarati
    'અપરાધ', 'પોલીસ', 'હત્યા', 'ચોરી', 'ડકાઈ', 'ઘોટાલો', 'ધોકાધડી', 'ગિરફતારી', 'હુમલો', 'હિંસા',
    # Marathi
    'गुन्हा', 'पोलिस', 'खून', 'चोरी', 'दरोडा', 'घोटाळा', 'फसवणूक', 'अटक', 'हल्ला', 'हिंसा',
  ),
}


def build_dictionary(raw: Mapping[str, Iterable[str]]) -> KeywordDictionary:
  """
  Freeze a raw category -> keywords mapping.

  Keywords are normalized, empty results dropped and duplicates inside a
  category removed (first occurrence wins). The result is read-only.
  """
  frozen = {}
  for category, keywords in raw.items():
    seen = {}
    for keyword in keywords:
      normalized = normalize_text(keyword)
      if normalized and normalized not in seen:
        seen[normalized] = None
    frozen[category] = tuple(seen)
  return MappingProxyType(frozen)


KEYWORD_DICTIONARY: KeywordDictionary = build_dictionary(_RAW_KEYWORDS)
