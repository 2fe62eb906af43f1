"""User-visible text in the supported locales."""

from typing import Dict, List, Optional

from trip_calendar.core.config import settings

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "format_error": "AI response format error: missing {marker}",
        "generation_failed": "Itinerary generation failed, please try again later.",
        "missing_api_key": "The AI service credential is not configured.",
        "session_not_found": "Trip session not found",
        "no_result": "This trip session has no generated itinerary yet.",
        "pace_relaxed": "Relaxed",
        "pace_normal": "Normal",
        "pace_packed": "Packed",
    },
    "zh-TW": {
        "format_error": "AI 響應格式錯誤：缺少 {marker}",
        "generation_failed": "行程生成失敗，請稍後再試。",
        "missing_api_key": "尚未設定 AI 服務金鑰。",
        "session_not_found": "找不到此行程規劃",
        "no_result": "此行程尚未生成。",
        "pace_relaxed": "輕鬆慢活",
        "pace_normal": "標準節奏",
        "pace_packed": "精實飽滿",
    },
}

LOADING_MESSAGES: Dict[str, List[str]] = {
    "en": [
        "Analyzing the best routes at your destination...",
        "Picking local food worth the detour...",
        "Planning smooth transit connections...",
        "Laying out your itinerary preview...",
        "Almost done. Is your luggage packed?",
    ],
    "zh-TW": [
        "正在分析目的地最佳路線...",
        "正在挑選推薦的在地美食...",
        "正在規劃順暢的交通接駁...",
        "正在編排精美的行程預覽...",
        "即將完成，準備好您的行李了嗎？",
    ],
}


def get_message(key: str, locale: Optional[str] = None, **kwargs: str) -> str:
    table = MESSAGES.get(locale or settings.locale, MESSAGES["en"])
    return table[key].format(**kwargs)


def loading_messages(locale: Optional[str] = None) -> List[str]:
    return LOADING_MESSAGES.get(locale or settings.locale, LOADING_MESSAGES["en"])
