"""Bundled CLDR relative time field data.

Each entry is a registration payload in the CLDR JSON shape accepted by
``LocaleCatalog.register``:

    {"locale": "en", "fields": {"day": {"displayName": "Day",
                                        "relative": {"-1": "yesterday", ...},
                                        "relativeTime": {"future": {...},
                                                         "past": {...}}}}}
"""

from __future__ import annotations

from typing import Any


def _field(
    display_name: str,
    future: dict[str, str],
    past: dict[str, str],
    relative: dict[str, str] | None = None,
) -> dict[str, Any]:
    data: dict[str, Any] = {
        "displayName": display_name,
        "relativeTime": {"future": future, "past": past},
    }
    if relative:
        data["relative"] = relative
    return data


def _one_other(
    display_name: str,
    future: tuple[str, str],
    past: tuple[str, str],
    relative: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Field for languages with a singular/plural distinction."""
    return _field(
        display_name,
        {"one": future[0], "other": future[1]},
        {"one": past[0], "other": past[1]},
        relative,
    )


def _other(
    display_name: str,
    future: str,
    past: str,
    relative: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Field for languages without plural inflection."""
    return _field(display_name, {"other": future}, {"other": past}, relative)


def _slavic(
    display_name: str,
    future: tuple[str, str, str, str],
    past: tuple[str, str, str, str],
    relative: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Field with one/few/many/other forms."""
    categories = ("one", "few", "many", "other")
    return _field(
        display_name,
        dict(zip(categories, future)),
        dict(zip(categories, past)),
        relative,
    )


def _arabic(
    display_name: str,
    future: tuple[str, str, str, str],
    past: tuple[str, str, str, str],
    relative: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Field with Arabic forms given as (one, two, few, other).

    ``zero`` and ``many`` share the ``other`` wording.
    """
    def forms(one: str, two: str, few: str, other: str) -> dict[str, str]:
        return {"zero": other, "one": one, "two": two, "few": few, "many": other, "other": other}

    return _field(display_name, forms(*future), forms(*past), relative)


BUILTIN_LOCALE_DATA: dict[str, dict[str, Any]] = {
    "en": {
        "locale": "en",
        "fields": {
            "second": _one_other(
                "Second",
                ("in {0} second", "in {0} seconds"),
                ("{0} second ago", "{0} seconds ago"),
                {"0": "now"},
            ),
            "minute": _one_other(
                "Minute",
                ("in {0} minute", "in {0} minutes"),
                ("{0} minute ago", "{0} minutes ago"),
            ),
            "hour": _one_other(
                "Hour",
                ("in {0} hour", "in {0} hours"),
                ("{0} hour ago", "{0} hours ago"),
            ),
            "day": _one_other(
                "Day",
                ("in {0} day", "in {0} days"),
                ("{0} day ago", "{0} days ago"),
                {"-1": "yesterday", "0": "today", "1": "tomorrow"},
            ),
            "month": _one_other(
                "Month",
                ("in {0} month", "in {0} months"),
                ("{0} month ago", "{0} months ago"),
                {"-1": "last month", "0": "this month", "1": "next month"},
            ),
            "year": _one_other(
                "Year",
                ("in {0} year", "in {0} years"),
                ("{0} year ago", "{0} years ago"),
                {"-1": "last year", "0": "this year", "1": "next year"},
            ),
        },
    },

    "de": {
        "locale": "de",
        "fields": {
            "second": _one_other(
                "Sekunde",
                ("in {0} Sekunde", "in {0} Sekunden"),
                ("vor {0} Sekunde", "vor {0} Sekunden"),
                {"0": "jetzt"},
            ),
            "minute": _one_other(
                "Minute",
                ("in {0} Minute", "in {0} Minuten"),
                ("vor {0} Minute", "vor {0} Minuten"),
            ),
            "hour": _one_other(
                "Stunde",
                ("in {0} Stunde", "in {0} Stunden"),
                ("vor {0} Stunde", "vor {0} Stunden"),
            ),
            "day": _one_other(
                "Tag",
                ("in {0} Tag", "in {0} Tagen"),
                ("vor {0} Tag", "vor {0} Tagen"),
                {"-2": "vorgestern", "-1": "gestern", "0": "heute", "1": "morgen", "2": "übermorgen"},
            ),
            "month": _one_other(
                "Monat",
                ("in {0} Monat", "in {0} Monaten"),
                ("vor {0} Monat", "vor {0} Monaten"),
                {"-1": "letzten Monat", "0": "diesen Monat", "1": "nächsten Monat"},
            ),
            "year": _one_other(
                "Jahr",
                ("in {0} Jahr", "in {0} Jahren"),
                ("vor {0} Jahr", "vor {0} Jahren"),
                {"-1": "letztes Jahr", "0": "dieses Jahr", "1": "nächstes Jahr"},
            ),
        },
    },

    "fr": {
        "locale": "fr",
        "fields": {
            "second": _one_other(
                "seconde",
                ("dans {0} seconde", "dans {0} secondes"),
                ("il y a {0} seconde", "il y a {0} secondes"),
                {"0": "maintenant"},
            ),
            "minute": _one_other(
                "minute",
                ("dans {0} minute", "dans {0} minutes"),
                ("il y a {0} minute", "il y a {0} minutes"),
            ),
            "hour": _one_other(
                "heure",
                ("dans {0} heure", "dans {0} heures"),
                ("il y a {0} heure", "il y a {0} heures"),
            ),
            "day": _one_other(
                "jour",
                ("dans {0} jour", "dans {0} jours"),
                ("il y a {0} jour", "il y a {0} jours"),
                {"-2": "avant-hier", "-1": "hier", "0": "aujourd’hui", "1": "demain", "2": "après-demain"},
            ),
            "month": _one_other(
                "mois",
                ("dans {0} mois", "dans {0} mois"),
                ("il y a {0} mois", "il y a {0} mois"),
                {"-1": "le mois dernier", "0": "ce mois-ci", "1": "le mois prochain"},
            ),
            "year": _one_other(
                "année",
                ("dans {0} an", "dans {0} ans"),
                ("il y a {0} an", "il y a {0} ans"),
                {"-1": "l’année dernière", "0": "cette année", "1": "l’année prochaine"},
            ),
        },
    },

    "es": {
        "locale": "es",
        "fields": {
            "second": _one_other(
                "segundo",
                ("dentro de {0} segundo", "dentro de {0} segundos"),
                ("hace {0} segundo", "hace {0} segundos"),
                {"0": "ahora"},
            ),
            "minute": _one_other(
                "minuto",
                ("dentro de {0} minuto", "dentro de {0} minutos"),
                ("hace {0} minuto", "hace {0} minutos"),
            ),
            "hour": _one_other(
                "hora",
                ("dentro de {0} hora", "dentro de {0} horas"),
                ("hace {0} hora", "hace {0} horas"),
            ),
            "day": _one_other(
                "día",
                ("dentro de {0} día", "dentro de {0} días"),
                ("hace {0} día", "hace {0} días"),
                {"-2": "anteayer", "-1": "ayer", "0": "hoy", "1": "mañana", "2": "pasado mañana"},
            ),
            "month": _one_other(
                "mes",
                ("dentro de {0} mes", "dentro de {0} meses"),
                ("hace {0} mes", "hace {0} meses"),
                {"-1": "el mes pasado", "0": "este mes", "1": "el próximo mes"},
            ),
            "year": _one_other(
                "año",
                ("dentro de {0} año", "dentro de {0} años"),
                ("hace {0} año", "hace {0} años"),
                {"-1": "el año pasado", "0": "este año", "1": "el próximo año"},
            ),
        },
    },

    "ru": {
        "locale": "ru",
        "fields": {
            "second": _slavic(
                "Секунда",
                ("через {0} секунду", "через {0} секунды", "через {0} секунд", "через {0} секунды"),
                ("{0} секунду назад", "{0} секунды назад", "{0} секунд назад", "{0} секунды назад"),
                {"0": "сейчас"},
            ),
            "minute": _slavic(
                "Минута",
                ("через {0} минуту", "через {0} минуты", "через {0} минут", "через {0} минуты"),
                ("{0} минуту назад", "{0} минуты назад", "{0} минут назад", "{0} минуты назад"),
            ),
            "hour": _slavic(
                "Час",
                ("через {0} час", "через {0} часа", "через {0} часов", "через {0} часа"),
                ("{0} час назад", "{0} часа назад", "{0} часов назад", "{0} часа назад"),
            ),
            "day": _slavic(
                "День",
                ("через {0} день", "через {0} дня", "через {0} дней", "через {0} дня"),
                ("{0} день назад", "{0} дня назад", "{0} дней назад", "{0} дня назад"),
                {"-2": "позавчера", "-1": "вчера", "0": "сегодня", "1": "завтра", "2": "послезавтра"},
            ),
            "month": _slavic(
                "Месяц",
                ("через {0} месяц", "через {0} месяца", "через {0} месяцев", "через {0} месяца"),
                ("{0} месяц назад", "{0} месяца назад", "{0} месяцев назад", "{0} месяца назад"),
                {"-1": "в прошлом месяце", "0": "в этом месяце", "1": "в следующем месяце"},
            ),
            "year": _slavic(
                "Год",
                ("через {0} год", "через {0} года", "через {0} лет", "через {0} года"),
                ("{0} год назад", "{0} года назад", "{0} лет назад", "{0} года назад"),
                {"-1": "в прошлом году", "0": "в этом году", "1": "в следующем году"},
            ),
        },
    },

    "ja": {
        "locale": "ja",
        "fields": {
            "second": _other("秒", "{0}秒後", "{0}秒前", {"0": "今"}),
            "minute": _other("分", "{0}分後", "{0}分前"),
            "hour": _other("時", "{0}時間後", "{0}時間前"),
            "day": _other(
                "日", "{0}日後", "{0}日前",
                {"-2": "一昨日", "-1": "昨日", "0": "今日", "1": "明日", "2": "明後日"},
            ),
            "month": _other("月", "{0}か月後", "{0}か月前", {"-1": "先月", "0": "今月", "1": "来月"}),
            "year": _other("年", "{0}年後", "{0}年前", {"-1": "昨年", "0": "今年", "1": "来年"}),
        },
    },

    "ko": {
        "locale": "ko",
        "fields": {
            "second": _other("초", "{0}초 후", "{0}초 전", {"0": "지금"}),
            "minute": _other("분", "{0}분 후", "{0}분 전"),
            "hour": _other("시", "{0}시간 후", "{0}시간 전"),
            "day": _other(
                "일", "{0}일 후", "{0}일 전",
                {"-2": "그저께", "-1": "어제", "0": "오늘", "1": "내일", "2": "모레"},
            ),
            "month": _other("월", "{0}개월 후", "{0}개월 전", {"-1": "지난달", "0": "이번 달", "1": "다음 달"}),
            "year": _other("년", "{0}년 후", "{0}년 전", {"-1": "작년", "0": "올해", "1": "내년"}),
        },
    },

    "zh": {
        "locale": "zh",
        "fields": {
            "second": _other("秒钟", "{0}秒钟后", "{0}秒钟前", {"0": "现在"}),
            "minute": _other("分钟", "{0}分钟后", "{0}分钟前"),
            "hour": _other("小时", "{0}小时后", "{0}小时前"),
            "day": _other(
                "日", "{0}天后", "{0}天前",
                {"-2": "前天", "-1": "昨天", "0": "今天", "1": "明天", "2": "后天"},
            ),
            "month": _other("月", "{0}个月后", "{0}个月前", {"-1": "上个月", "0": "本月", "1": "下个月"}),
            "year": _other("年", "{0}年后", "{0}年前", {"-1": "去年", "0": "今年", "1": "明年"}),
        },
    },

    "ar": {
        "locale": "ar",
        "fields": {
            "second": _arabic(
                "الثواني",
                ("خلال ثانية واحدة", "خلال ثانيتين", "خلال {0} ثوانٍ", "خلال {0} ثانية"),
                ("قبل ثانية واحدة", "قبل ثانيتين", "قبل {0} ثوانِ", "قبل {0} ثانية"),
                {"0": "الآن"},
            ),
            "minute": _arabic(
                "الدقائق",
                ("خلال دقيقة واحدة", "خلال دقيقتين", "خلال {0} دقائق", "خلال {0} دقيقة"),
                ("قبل دقيقة واحدة", "قبل دقيقتين", "قبل {0} دقائق", "قبل {0} دقيقة"),
            ),
            "hour": _arabic(
                "الساعات",
                ("خلال ساعة واحدة", "خلال ساعتين", "خلال {0} ساعات", "خلال {0} ساعة"),
                ("قبل ساعة واحدة", "قبل ساعتين", "قبل {0} ساعات", "قبل {0} ساعة"),
            ),
            "day": _arabic(
                "يوم",
                ("خلال يوم واحد", "خلال يومين", "خلال {0} أيام", "خلال {0} يوم"),
                ("قبل يوم واحد", "قبل يومين", "قبل {0} أيام", "قبل {0} يوم"),
                {"-2": "أول أمس", "-1": "أمس", "0": "اليوم", "1": "غدًا", "2": "بعد الغد"},
            ),
            "month": _arabic(
                "الشهر",
                ("خلال شهر واحد", "خلال شهرين", "خلال {0} أشهر", "خلال {0} شهر"),
                ("قبل شهر واحد", "قبل شهرين", "قبل {0} أشهر", "قبل {0} شهر"),
                {"-1": "الشهر الماضي", "0": "هذا الشهر", "1": "الشهر القادم"},
            ),
            "year": _arabic(
                "السنة",
                ("خلال سنة واحدة", "خلال سنتين", "خلال {0} سنوات", "خلال {0} سنة"),
                ("قبل سنة واحدة", "قبل سنتين", "قبل {0} سنوات", "قبل {0} سنة"),
                {"-1": "السنة الماضية", "0": "السنة الحالية", "1": "السنة القادمة"},
            ),
        },
    },
}


def get_builtin_locales() -> list[str]:
    """Get the keys of the bundled locales."""
    return list(BUILTIN_LOCALE_DATA)
