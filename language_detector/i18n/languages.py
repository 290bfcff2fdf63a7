"""
Language metadata table

Maps every language key produced by the code tables to its display
descriptor.  Built once at import time and exposed as a read-only mapping.
"""

from __future__ import annotations

from types import MappingProxyType

from pydantic import BaseModel, ConfigDict


class LanguageName(BaseModel):
    """Display metadata for one language key.

    Field names are part of the public contract: ``key``, ``english``,
    ``origin`` (endonym), ``chinese`` and ``rtl``.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    english: str
    origin: str
    chinese: str
    rtl: bool = False


def _entry(key: str, english: str, origin: str, chinese: str, rtl: bool = False) -> tuple[str, LanguageName]:
    return key, LanguageName(key=key, english=english, origin=origin, chinese=chinese, rtl=rtl)


_LANGUAGE_ENTRIES: tuple[tuple[str, LanguageName], ...] = (
    _entry("albanian", "Albanian", "Shqip", "阿尔巴尼亚语"),
    _entry("arabic", "Arabic", "عربي", "阿拉伯语", rtl=True),
    _entry("bangla", "Bangla", "বাংলা", "孟加拉语"),
    _entry("belarusian", "Belarusian", "беларускі", "白俄罗斯语"),
    _entry("bengali", "Bengali", "বাংলা", "孟加拉语"),
    _entry("bulgarian", "Bulgarian", "български", "保加利亚语"),
    _entry("cambodia", "Khmer", "ខ្មែរ", "高棉语"),
    _entry("cantonese", "Chinese (Traditional)", "中文(繁體)", "中文(繁体)"),
    _entry("chinese", "Chinese Simplified", "简体中文", "简体中文"),
    _entry("croatian", "Croatian", "Hrvatski", "克罗地亚语"),
    _entry("czech", "Czech", "čeština", "捷克语"),
    _entry("danish", "Danish", "dansk", "丹麦语"),
    _entry("dutch", "Dutch", "Nederlands", "荷兰语"),
    _entry("english", "English", "English", "英语"),
    _entry("esperanto", "Esperanto", "Esperanto", "世界语"),
    _entry("filipino", "Filipino", "Filipino", "菲律宾语"),
    _entry("finnish", "Finnish", "suomi", "芬兰语"),
    _entry("french", "French", "Français", "法语"),
    _entry("german", "German", "Deutsch", "德语"),
    _entry("greek", "Greek", "Ελληνικά", "希腊语"),
    _entry("hausa", "Hausa", "Hausa", "豪萨语"),
    _entry("hebrew", "Hebrew", "עִברִית", "希伯来语", rtl=True),
    _entry("hindi", "Hindi", "हिंदी", "印地语"),
    _entry("hungarian", "Hungarian", "magyar", "匈牙利语"),
    _entry("indonesian", "Indonesian", "bahasa Indonesia", "印尼语"),
    _entry("italian", "Italian", "italiano", "意大利语"),
    _entry("japanese", "Japanese", "日本語", "日语"),
    _entry("korean", "Korean", "한국어", "韩语"),
    _entry("laos", "Lao", "ພາສາລາວ", "老挝语"),
    _entry("malay", "Malay", "Melayu", "马来语"),
    _entry("mongolian", "Mongolian", "Монгол", "蒙古语"),
    _entry("myanmar", "Myanmar", "မြန်မာ", "缅甸语"),
    _entry("norwegian", "Norwegian", "norsk", "挪威语"),
    _entry("nepali", "Nepali", "नेपाली", "尼泊尔语"),
    _entry("pashto", "Pashto", "پښتو", "普什图语", rtl=True),
    _entry("persian", "Persian", "فارسی", "波斯语", rtl=True),
    _entry("poland", "Polish", "Polski", "波兰语"),
    _entry("portuguese", "Portuguese", "Português", "葡萄牙语"),
    _entry("romanian", "Romanian", "Română", "罗马尼亚语"),
    _entry("russian", "Russian", "Русский", "俄语"),
    _entry("serbian", "Serbian", "Српски", "塞尔维亚语"),
    _entry("sinhalese", "Sinhalese", "සිංහල", "僧伽罗语"),
    _entry("slovak", "Slovak", "slovenský", "斯洛伐克语"),
    _entry("spanish", "Spanish", "español", "西班牙语"),
    _entry("swahili", "Swahili", "kiswahili", "斯瓦希里语"),
    _entry("swedish", "Swedish", "svenska", "瑞典语"),
    _entry("tamil", "Tamil", "தமிழ்", "泰米尔语"),
    _entry("thai", "Thai", "ไทย", "泰语"),
    _entry("turkish", "Turkish", "Türkçe", "土耳其语"),
    _entry("ukrainian", "Ukrainian", "українська", "乌克兰语"),
    _entry("urdu", "Urdu", "اردو", "乌尔都语", rtl=True),
    _entry("vietnamese", "Vietnamese", "Tiếng Việt", "越南语"),
    _entry("afrikaans", "Afrikaans", "Afrikaans", "南非荷兰语"),
    _entry("amharic", "Amharic", "አማርኛ", "阿姆哈拉语"),
    _entry("azeri", "Azeri", "Azərbaycan", "阿塞拜疆语"),
    _entry("bosnian", "Bosnian", "bosanski", "波斯尼亚语"),
    _entry("catalan", "Catalan", "Catalana", "加泰罗尼亚语"),
    _entry("welsh", "Welsh", "Cymraeg", "威尔士语"),
    _entry("estonian", "Estonian", "eestlane", "爱沙尼亚语"),
    _entry("basque", "Basque", "euskeraz", "巴斯克语"),
    _entry("irish", "Irish", "Gaeilge", "爱尔兰语"),
    _entry("galician", "Galician", "Galega", "加利西亚语"),
    _entry("gujarati", "Gujarati", "ગુજરાતી", "古吉拉特语"),
    _entry("armenian", "Armenian", "հայերեն", "亚美尼亚语"),
    _entry("icelandic", "Icelandic", "íslenskur", "冰岛语"),
    _entry("javanese", "Javanese", "basa jawa", "爪哇语"),
    _entry("georgian", "Georgian", "ქართული", "格鲁吉亚语"),
    _entry("kazakh", "Kazakh", "қазақ", "哈萨克语"),
    _entry("kannada", "Kannada", "ಕನ್ನಡ", "卡纳达语"),
    _entry("lithuanian", "Lithuanian", "lietuvių", "立陶宛语"),
    _entry("latvian", "Latvian", "latviešu", "拉脱维亚语"),
    _entry("macedonian", "Macedonian", "македонски", "马其顿语"),
    _entry("marathi", "Marathi", "मराठी", "马拉地语"),
    _entry("maltese", "Maltese", "Malti", "马耳他语"),
    _entry("punjabi", "Punjabi", "ਪੰਜਾਬੀ", "旁遮普语"),
    _entry("slovenian", "Slovenian", "Slovenščina", "斯洛文尼亚语"),
    _entry("somali", "Somali", "Soomaali", "索马里语"),
    _entry("telugu", "Telugu", "తెలుగు", "泰卢固语"),
    _entry("uzbek", "Uzbek", "o'zbek", "乌兹别克语"),
    _entry("zulu", "Zulu", "Zulu", "祖鲁语"),
    _entry("sundanese", "Sundanese", "Basa Sunda", "巽他语"),
    _entry("assamese", "Assamese", "অসমীয়া", "阿萨姆语"),
    _entry("fijian", "Fijian", "Fijian", "斐济语"),
    _entry("haitian", "Haitian", "Kreyòl Ayisyen", "海地克里奥尔语"),
    _entry("hmong", "Hmong", "Hmoob", "苗语"),
    _entry("inuktitut", "Inuktitut", "ᐃᓄᒃᑎᑐᑦ", "因纽特语"),
    _entry("klingon", "Klingon", "tlhIngan", "克林贡语"),
    _entry("kurdish", "Kurdish", "Kurdî", "库尔德语", rtl=True),
    _entry("malagasy", "Malagasy", "Malagasy", "马尔加什语"),
    _entry("maori", "Maori", "Māori", "毛利语"),
    _entry("oriya", "Oriya", "ଓଡ଼ିଆ", "奥里亚语"),
    _entry("queretaro", "Queretaro", "Queretaro", "克雷塔罗瓦克语"),
    _entry("samoan", "Samoan", "Samoan", "萨摩亚语"),
    _entry("tahitian", "Tahitian", "Tahitian", "大溪地语"),
    _entry("tigrinya", "Tigrinya", "ትግርኛ", "提格利尼亚语"),
    _entry("tongan", "Tongan", "Tongan", "汤加语"),
    _entry("yucatec", "Yucatec", "Yucatec", "尤卡坦玛雅语"),
)

LANGUAGE_NAMES: MappingProxyType[str, LanguageName] = MappingProxyType(dict(_LANGUAGE_ENTRIES))

# Keys whose scripts read right-to-left
RTL_LANGUAGES: frozenset[str] = frozenset(key for key, info in LANGUAGE_NAMES.items() if info.rtl)
