from typing import Dict, Optional

from tourney_store.core.config import settings

DEFAULT_LOCALE = "bn"

# Result messages shown to the user by the presentation layer
MESSAGES: Dict[str, Dict[str, str]] = {
    "bn": {
        "login_success": "লগইন সফল হয়েছে",
        "invalid_credentials": "আইডি বা পাসওয়ার্ড ভুল!",
        "account_exists": "এই ফোন বা আইডি দিয়ে অলরেডি অ্যাকাউন্ট আছে",
        "missing_fields": "সব তথ্য পূরণ করুন",
        "register_success": "অ্যাকাউন্ট তৈরি সফল হয়েছে",
        "login_required": "লগইন করুন",
        "insufficient_balance": "পর্যাপ্ত ব্যালেন্স নেই",
        "tournament_not_found": "টুর্নামেন্ট পাওয়া যায়নি",
        "join_success": "সফলভাবে যোগ দিয়েছেন",
        "below_min_deposit": "সর্বনিম্ন ডিপোজিট {minimum} টাকা",
        "below_min_withdraw": "সর্বনিম্ন উইথড্র {minimum} টাকা",
        "payment_limits_ok": "রিকোয়েস্ট পাঠানো যাবে",
    },
    "en": {
        "login_success": "Logged in successfully",
        "invalid_credentials": "Wrong ID or password!",
        "account_exists": "An account with this phone or ID already exists",
        "missing_fields": "Please fill in all fields",
        "register_success": "Account created successfully",
        "login_required": "Please log in",
        "insufficient_balance": "Insufficient balance",
        "tournament_not_found": "Tournament not found",
        "join_success": "Joined successfully",
        "below_min_deposit": "Minimum deposit is {minimum}",
        "below_min_withdraw": "Minimum withdrawal is {minimum}",
        "payment_limits_ok": "Request can be submitted",
    },
}


def get_message(key: str, locale: Optional[str] = None, **params) -> str:
    """
    Look up a result message. Unknown locales fall back to Bengali, which is
    the language the stored notices are written in.
    """
    catalogue = MESSAGES.get(locale or settings.LOCALE, MESSAGES[DEFAULT_LOCALE])
    text = catalogue[key]
    return text.format(**params) if params else text
