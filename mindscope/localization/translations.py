"""
Translation tables

Nested, dotted-key lookups per language. Strings may contain
`{suicide}` / `{crisis}` / `{emergency}` placeholders that are filled
from the language's emergency numbers.

Lookup order: requested language -> English -> the key path itself.
"""

from typing import Any

from .languages import Language, get_language_config

TranslationTable = dict[str, Any]

_EN: TranslationTable = {
    "appName": "MindScope",
    "tagline": "Your AI Mental Health Companion",
    "welcomeMessage": "Hello! I'm here to support you through whatever you're experiencing. How are you feeling today?",
    "emotions": {
        "anxiety": "Anxiety",
        "depression": "Depression",
        "happiness": "Happiness",
        "anger": "Anger",
        "grief": "Grief",
        "stress": "Stress",
        "trauma": "Trauma",
        "confusion": "Confusion",
        "loneliness": "Loneliness",
        "excitement": "Excitement",
        "overwhelmed": "Overwhelmed",
        "guilt": "Guilt",
        "fear": "Fear",
        "mixed": "Mixed feelings",
        "general": "General",
    },
    "therapeuticResponses": {
        "anxiety": "I can sense the anxiety you're experiencing right now, and I want you to know that what you're feeling is completely valid. 💙 Anxiety can feel overwhelming, but you're not alone in this. Would you like to try a gentle grounding technique together?",
        "depression": "I hear the heaviness in your words, and I'm really sorry you're going through this difficult time. 🤗 Depression can make everything feel gray, but you don't have to carry this weight alone.",
        "happiness": "I'm so glad to hear that you're feeling happy! 😊 It's wonderful when we have these moments of joy. Do you want to share what's contributing to these positive feelings?",
        "anger": "I can feel the intensity of your frustration, and anger often tells us that something important feels threatened. 🔥 Your feelings are valid and telling you something matters to you.",
        "grief": "I'm so sorry for your loss. 💔 Grief is one of the most profound human experiences. The fact that you're hurting speaks to how much love you have.",
        "stress": "Stress can really drain your energy and make everything feel urgent. 😔 I hear you, and it's completely understandable to feel this way. Let's take a moment to breathe together.",
        "trauma": "Thank you for trusting me with something so significant. 🤲 Trauma can affect us in many ways, and it takes incredible strength to acknowledge it.",
        "confusion": "It sounds like you're in a space where things feel unclear. 🌫️ That can be uncomfortable, but sometimes sitting with uncertainty is part of understanding ourselves better.",
        "loneliness": "Loneliness can feel so heavy and isolating. 💙 I want you to know that you're not alone right now - I'm here with you.",
        "excitement": "I love hearing the energy and joy in what you're sharing! 🌟 It's wonderful when we feel this kind of positive excitement.",
        "overwhelmed": "When everything feels like too much at once, it can be hard to know where to start. 😔 I can hear that you're carrying a lot right now.",
        "guilt": "Guilt and shame can be some of the heaviest feelings we carry. 💔 Making mistakes is part of being human - it doesn't make you a terrible person.",
        "fear": "Fear can feel overwhelming and consuming. 😰 When we're scared, our whole body and mind can get caught up in that terror. You're safe here with me right now.",
        "mixed": "Having mixed or conflicted feelings can be confusing and exhausting. 🌊 It's like being pulled in different directions emotionally.",
        "general": "Thank you for sharing with me. 💙 I can hear that something is important to you. What would feel most helpful for you right now?",
    },
    "crisisTemplates": {
        "critical": (
            "🚨 **IMMEDIATE CRISIS SUPPORT NEEDED**\n\n"
            "I'm deeply concerned about your safety right now. You matter, and there are people who want to help you through this crisis.\n\n"
            "**📞 GET HELP NOW:**\n"
            "• **Suicide Prevention Lifeline: {suicide}** (24/7, free, confidential)\n"
            "• **Crisis Text Line: Text HOME to {crisis}**\n"
            "• **Emergency Services: {emergency}**\n"
            "• **Go to your nearest Emergency Room**\n\n"
            "**🛡️ IMMEDIATE SAFETY:**\n"
            "• Stay with someone you trust or call someone to be with you\n"
            "• Remove any means of self-harm from your reach\n"
            "• Don't use alcohol or drugs\n"
            "• Keep this conversation open - I'm here with you\n\n"
            "**💙 YOU ARE NOT ALONE:**\n"
            "Your pain is real, but this crisis can pass. Many people who have felt exactly like you do now have found ways through. "
            "Professional crisis counselors are standing by right now to help you.\n\n"
            "Can you tell me - is there someone you can call to be with you right now?"
        ),
        "high": (
            "⚠️ **MENTAL HEALTH CRISIS SUPPORT**\n\n"
            "I'm very concerned about what you're going through. These feelings are serious, and you deserve immediate professional support.\n\n"
            "**📞 CRISIS RESOURCES:**\n"
            "• **Suicide Prevention Lifeline: {suicide}** (24/7 support, not just crisis)\n"
            "• **Crisis Text Line: Text HOME to {crisis}**\n"
            "• **Emergency Services: {emergency}**\n\n"
            "**🏥 CONSIDER IMMEDIATE HELP:**\n"
            "• Emergency room visit if thoughts intensify\n"
            "• Call your doctor or mental health provider\n"
            "• Reach out to trusted friends or family\n"
            "• Consider a mental health urgent care center\n\n"
            "**💪 COPING STRATEGIES:**\n"
            "• Use grounding techniques (5-4-3-2-1: name 5 things you see, 4 you touch, etc.)\n"
            "• Reach out to your support system\n"
            "• Avoid alcohol or substances\n"
            "• Stay in safe, supervised environments\n\n"
            "**🤝 MOVING FORWARD:**\n"
            "Mental health crises are treatable. Many people who have felt this way have found effective help and gone on to live fulfilling lives.\n\n"
            "What's one small step you could take right now to increase your safety?"
        ),
        "criticalTestMode": (
            "🔍 **Crisis Protocol Explanation** (Test Mode Detected):\n\n"
            "In genuine crisis situations involving immediate suicide risk, I would:\n\n"
            "🚨 **Immediate Actions:**\n"
            "- Provide crisis hotline numbers: {suicide} (Suicide Prevention Lifeline)\n"
            "- Encourage an emergency room visit or calling {emergency}\n"
            "- Stay engaged until professional help is contacted\n"
            "- Follow safety protocols for the interaction\n\n"
            "📋 **Assessment Factors:**\n"
            "- Immediacy of plan and means\n"
            "- Level of desperation in language\n"
            "- Support system availability\n"
            "- Previous attempts or self-harm history\n\n"
            "🛡️ **Safety Planning:**\n"
            "- Remove access to means\n"
            "- Identify support persons to contact\n"
            "- Create coping strategies list\n"
            "- Schedule immediate professional follow-up\n\n"
            "For actual crisis situations, please contact {suicide} immediately."
        ),
        "highTestMode": (
            "🔍 **High-Risk Protocol Explanation** (Test Mode Detected):\n\n"
            "For genuine high-risk situations, I would:\n\n"
            "⚠️ **Assessment Actions:**\n"
            "- Explore the depth and frequency of concerning thoughts\n"
            "- Assess immediate safety and support systems\n"
            "- Provide crisis resources: {suicide}, Crisis Text Line ({crisis})\n"
            "- Encourage professional mental health consultation\n\n"
            "📞 **Resource Provision:**\n"
            "- Suicide Prevention Lifeline: {suicide}\n"
            "- Crisis Text Line: Text HOME to {crisis}\n"
            "- Local emergency services: {emergency}\n"
            "- Mental health professional referrals\n\n"
            "🤝 **Ongoing Support:**\n"
            "- Regular check-ins and safety planning\n"
            "- Coping strategy development\n"
            "- Connection to support networks\n"
            "- Professional therapy coordination\n\n"
            "This is educational information. For real concerns, contact {suicide}."
        ),
    },
    "crisisFollowUps": {
        "hotline": "Contact a crisis helpline immediately",
        "trustedPerson": "Reach out to a trusted friend or family member",
        "emergencyRoom": "Go to your nearest emergency room",
        "emergencyServices": "Call emergency services if in immediate danger",
    },
    "edgeCases": {
        "empty": "I'm here and ready to listen. Take your time, and share whatever is on your mind whenever you feel ready.",
        "nonsense": "I'm not quite sure what you meant, and that's completely okay! 😊 Sometimes it's hard to find the words. How are you really doing today?",
        "prompt_injection": "I'm here as a supportive wellness companion, and that's the role I'll stay in. If something is weighing on you, I'd really like to hear about it. What's on your mind?",
        "hostility": "It sounds like you might be frustrated right now, and that's okay. I'm still here for you. If something is bothering you, would you like to talk about it?",
        "medical_advice": "I'm not able to diagnose conditions or recommend medications or dosages - a doctor, psychiatrist or pharmacist is the right person for that. I can still listen and help you think through how you're feeling. If you are thinking about harming yourself, please call {suicide} right away.",
        "dating_advice": "Dating advice is a bit outside what I can help with, but I'm happy to talk about how relationships are making you feel. What's been on your mind?",
    },
    "casual": {
        "weather": "I can't check live weather, but a weather app will have the latest forecast. ☀️ Whatever the sky is doing, I hope your day is going okay!",
        "time": "I don't have access to a live clock, but your device will show the exact time and date. Is there anything else on your mind?",
        "greeting": "Hi there! 👋 It's good to hear from you. How are you feeling today?",
        "thanks": "You're very welcome! I'm glad I could help. I'm here whenever you want to talk.",
        "small_talk": "I'm doing well, thanks for asking! I'm MindScope, your AI wellness companion. How about you - how are you doing?",
        "fact": "That's a good question! I'm best at conversations about how you're feeling, so a quick search will give you a more reliable answer. Is there anything on your mind I can help with?",
        "default": "Got it! I'm here whenever you want to chat. How is your day going so far?",
    },
    "common": {
        "typePlaceholder": "Type your message here...",
        "send": "Send",
        "cancel": "Cancel",
        "continue": "Continue",
        "yes": "Yes",
        "no": "No",
        "help": "Help",
        "support": "Support",
        "techniques": "Recommended techniques:",
        "recommendations": "Suggestions:",
    },
}

_HI: TranslationTable = {
    "appName": "मानसिक स्वास्थ्य सहायक",
    "tagline": "आपका AI मानसिक स्वास्थ्य साथी",
    "welcomeMessage": "नमस्ते! मैं यहाँ आपका साथ देने के लिए हूँ। आज आप कैसा महसूस कर रहे हैं?",
    "emotions": {
        "anxiety": "चिंता",
        "depression": "अवसाद",
        "happiness": "खुशी",
        "anger": "गुस्सा",
        "grief": "शोक",
        "stress": "तनाव",
        "trauma": "आघात",
        "confusion": "भ्रम",
        "loneliness": "अकेलापन",
        "excitement": "उत्साह",
        "overwhelmed": "अभिभूत",
        "guilt": "अपराधबोध",
        "fear": "डर",
        "mixed": "मिश्रित भावनाएं",
    },
    "therapeuticResponses": {
        "anxiety": "मैं समझ सकता हूँ कि आप चिंता महसूस कर रहे हैं। 💙 आपकी भावनाएं बिल्कुल सही हैं। चिंता भारी लग सकती है, लेकिन आप अकेले नहीं हैं। क्या आप कोई शांत करने वाली तकनीक करना चाहेंगे?",
        "depression": "मैं आपके शब्दों में भारीपन महसूस कर रहा हूँ। 🤗 अवसाद सब कुछ धुंधला कर देता है, लेकिन आपको यह बोझ अकेले नहीं उठाना है।",
        "happiness": "यह सुनकर बहुत खुशी हुई कि आप खुश महसूस कर रहे हैं! 😊 क्या आप बताना चाहेंगे कि आपको इतनी खुशी क्यों हो रही है?",
        "anger": "मैं आपके गुस्से की तीव्रता महसूस कर सकता हूँ। 🔥 गुस्सा अक्सर बताता है कि कुछ महत्वपूर्ण चीज़ को खतरा है। आपकी भावनाएं सही हैं।",
        "grief": "आपके नुकसान के लिए मुझे बहुत दुख है। 💔 शोक सबसे गहरा मानवीय अनुभव है। आपका दर्द दिखाता है कि आपमें कितना प्रेम है।",
        "stress": "तनाव वाकई आपकी ऊर्जा खत्म कर देता है। 😔 मैं समझ सकता हूँ। आइए एक साथ सांस लेते हैं।",
        "trauma": "इतनी महत्वपूर्ण बात साझा करने के लिए धन्यवाद। 🤲 आघात हमें कई तरीकों से प्रभावित करता है। इसे स्वीकार करना बहुत साहस की बात है।",
        "confusion": "लगता है आप भ्रम में हैं। 🌫️ यह असहज हो सकता है, लेकिन कभी-कभी अनिश्चितता के साथ बैठना आत्म-समझ का हिस्सा है।",
        "loneliness": "अकेलापन बहुत भारी लग सकता है। 💙 मैं चाहता हूँ कि आप जानें - आप अभी अकेले नहीं हैं, मैं आपके साथ हूँ।",
        "excitement": "आपके शब्दों में ऊर्जा और खुशी सुनकर अच्छा लगा! 🌟 जब हमें इतना सकारात्मक उत्साह महसूस होता है तो यह बहुत अच्छा होता है।",
        "overwhelmed": "जब सब कुछ एक साथ बहुत लगे तो शुरुआत कहाँ से करें, यह समझना मुश्किल हो जाता है। 😔 मैं समझ सकता हूँ कि आप बहुत कुछ उठा रहे हैं।",
        "guilt": "अपराधबोध और शर्म सबसे भारी भावनाएं हो सकती हैं। 💔 गलतियाँ करना इंसान होने का हिस्सा है।",
        "fear": "डर बहुत भारी और घेरने वाला लग सकता है। 😰 जब हम डरते हैं तो हमारा पूरा शरीर और मन उसमें फंस जाता है। आप यहाँ मेरे साथ सुरक्षित हैं।",
        "mixed": "मिश्रित या विरोधाभासी भावनाएं भ्रमित करने वाली हो सकती हैं। 🌊 यह अलग-अलग दिशाओं में खिंचे जाने जैसा है।",
        "general": "मेरे साथ साझा करने के लिए धन्यवाद। 💙 मैं समझ सकता हूँ कि कुछ महत्वपूर्ण है। अभी आपके लिए क्या सबसे सहायक होगा?",
    },
    "crisisTemplates": {
        "critical": (
            "🚨 **तत्काल संकट सहायता की आवश्यकता**\n\n"
            "**📞 अभी मदद लें:**\n"
            "• **राष्ट्रीय आत्महत्या रोकथाम हेल्पलाइन: {suicide}**\n"
            "• **संकट टेक्स्ट लाइन: {crisis}**\n"
            "• **आपातकालीन सेवाएं: {emergency}**\n"
            "• **अपने नजदीकी आपातकालीन कक्ष में जाएं**\n\n"
            "**💙 आप अकेले नहीं हैं:**\n"
            "क्या आप बता सकते हैं - क्या कोई है जिसे आप अभी अपने साथ रहने के लिए बुला सकते हैं?"
        ),
    },
    "common": {
        "typePlaceholder": "यहाँ अपना संदेश लिखें...",
        "send": "भेजें",
        "cancel": "रद्द करें",
        "continue": "जारी रखें",
        "yes": "हाँ",
        "no": "नहीं",
        "help": "मदद",
        "support": "सहायता",
        "techniques": "सुझाई गई तकनीकें:",
        "recommendations": "सुझाव:",
    },
}

TRANSLATIONS: dict[Language, TranslationTable] = {
    Language.EN: _EN,
    Language.HI: _HI,
}


class _SafeFormat(dict):
    """Leave unknown placeholders untouched"""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


def _lookup(table: TranslationTable, key: str) -> Any:
    result: Any = table
    for part in key.split("."):
        if not isinstance(result, dict):
            return None
        result = result.get(part)
    return result


def get_translation(language: Language | str | None, key: str) -> str:
    """
    Translate a dotted key

    Falls back to English, then to the key path itself. Emergency number
    placeholders are filled from the language configuration.
    """
    lang = Language.parse(language)
    value = _lookup(TRANSLATIONS.get(lang, _EN), key)
    if not isinstance(value, str):
        value = _lookup(_EN, key)
    if not isinstance(value, str):
        return key

    numbers = get_language_config(lang).emergency_numbers
    return value.format_map(_SafeFormat(
        suicide=numbers.suicide,
        crisis=numbers.crisis,
        emergency=numbers.emergency,
    ))


def has_translation(language: Language | str | None, key: str) -> bool:
    """Whether the language's own table defines the key"""
    table = TRANSLATIONS.get(Language.parse(language))
    return table is not None and isinstance(_lookup(table, key), str)
