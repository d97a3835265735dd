from pydantic import BaseModel

DEFAULT_MARQUEE_NOTICE = (
    "আজকের টুর্নামেন্টে যোগ দিন এবং জিতে নিন আকর্ষণীয় প্রাইজ মানি! "
    "রুম আইডি খেলার ১০ মিনিট আগে দেওয়া হবে।"
)

class AppSettings(BaseModel):
    admin_bkash: str = "01712345678"
    admin_nagad: str = "01912345678"
    marquee_notice: str = DEFAULT_MARQUEE_NOTICE
    min_deposit: int = 100
    min_withdraw: int = 200

    class Config:
        frozen = True
