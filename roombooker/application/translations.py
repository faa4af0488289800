from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    EN = "en"
    AR = "ar"


class MessageKey(str, Enum):
    BOOKING_ADDED = "bookingAdded"
    BOOKING_UPDATED = "bookingUpdated"
    BOOKING_DELETED = "bookingDeleted"
    BOOKING_CONFLICT = "bookingConflict"
    ROOM_ADDED = "roomAdded"
    ROOM_UPDATED = "roomUpdated"
    ROOM_DELETED = "roomDeleted"
    USER_ADDED = "userAdded"
    USER_DELETED = "userDeleted"
    ROLE_UPDATED = "roleUpdated"
    PERMISSIONS_UPDATED = "permissionsUpdated"
    LOGIN_ERROR = "loginError"


TRANSLATIONS: dict[Language, dict[MessageKey, str]] = {
    Language.EN: {
        MessageKey.BOOKING_ADDED: "Booking added successfully.",
        MessageKey.BOOKING_UPDATED: "Booking updated successfully.",
        MessageKey.BOOKING_DELETED: "Booking deleted.",
        MessageKey.BOOKING_CONFLICT: "This room is already booked for the selected time.",
        MessageKey.ROOM_ADDED: "Room added successfully.",
        MessageKey.ROOM_UPDATED: "Room updated successfully.",
        MessageKey.ROOM_DELETED: "Room deleted.",
        MessageKey.USER_ADDED: "User added successfully.",
        MessageKey.USER_DELETED: "User deleted.",
        MessageKey.ROLE_UPDATED: "User role updated.",
        MessageKey.PERMISSIONS_UPDATED: "Permissions updated.",
        MessageKey.LOGIN_ERROR: "Invalid username or password.",
    },
    Language.AR: {
        MessageKey.BOOKING_ADDED: "تمت إضافة الحجز بنجاح.",
        MessageKey.BOOKING_UPDATED: "تم تحديث الحجز بنجاح.",
        MessageKey.BOOKING_DELETED: "تم حذف الحجز.",
        MessageKey.BOOKING_CONFLICT: "هذه الغرفة محجوزة بالفعل في الوقت المحدد.",
        MessageKey.ROOM_ADDED: "تمت إضافة الغرفة بنجاح.",
        MessageKey.ROOM_UPDATED: "تم تحديث الغرفة بنجاح.",
        MessageKey.ROOM_DELETED: "تم حذف الغرفة.",
        MessageKey.USER_ADDED: "تمت إضافة المستخدم بنجاح.",
        MessageKey.USER_DELETED: "تم حذف المستخدم.",
        MessageKey.ROLE_UPDATED: "تم تحديث دور المستخدم.",
        MessageKey.PERMISSIONS_UPDATED: "تم تحديث الصلاحيات.",
        MessageKey.LOGIN_ERROR: "اسم المستخدم أو كلمة المرور غير صحيحة.",
    },
}


def translate(key: MessageKey, language: Language | str = Language.EN) -> str:
    """Look up `key` in `language`, falling back to English, then to the key itself."""
    try:
        lang = Language(language)
    except ValueError:
        lang = Language.EN
    return (
        TRANSLATIONS.get(lang, {}).get(key)
        or TRANSLATIONS[Language.EN].get(key)
        or key.value
    )
