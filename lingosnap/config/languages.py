"""Target-language configurations (translation language, layout and UI strings)."""

LANG_CONFIG = {
    "FA": {
        "name": "Persian",
        "html_lang": "fa",
        "direction": "rtl",
        "font_family": "Vazirmatn",
        "font_url": "https://fonts.googleapis.com/css2?family=Vazirmatn:wght@400;700&display=swap",
        "messages": {
            "app_title": "LingoSnap",
            "tab_search": "جستجو",
            "tab_saved": "ذخیره شده‌ها",
            "search_hint": "Type an English word... (e.g. Apple)",
            "search_button": "جستجو",
            "loading_title": "در حال تحلیل کلمه و تولید مثال و تصویر...",
            "loading_subtitle": "این فرآیند چند لحظه زمان می‌برد",
            "search_error": "متأسفانه کلمه مورد نظر پیدا نشد یا خطایی در سیستم رخ داد.",
            "empty_title": "کلمه‌ای برای یادگیری وارد کنید",
            "empty_subtitle": "معنی، تلفظ، مثال کاربردی و تصویر اختصاصی را دریافت کنید.",
            "saved_empty_title": "هنوز کلمه‌ای ذخیره نکرده‌اید",
            "saved_empty_subtitle": "کلمات جدیدی را جستجو و آن‌ها را ذخیره کنید.",
            "save_button": "ذخیره کلمه",
            "remove_button": "حذف",
            "duplicate_notice": "این کلمه قبلاً ذخیره شده است.",
            "save_failed": "ذخیره‌سازی با خطا مواجه شد.",
            "select_all": "انتخاب همه",
            "clear_selection": "لغو انتخاب همه",
            "selected_count": "{count} کلمه انتخاب شده",
            "print_button": "چاپ لغات",
            "print_title": "لیست لغات انگلیسی من",
            "print_window_title": "LingoSnap - لغات من",
            "phonetic_label": "تلفظ",
            "example_label": "Example",
            "listen_tooltip": "Listen",
        },
    },
    "DE": {
        "name": "German",
        "html_lang": "de",
        "direction": "ltr",
        "font_family": "Inter",
        "font_url": "https://fonts.googleapis.com/css2?family=Inter:wght@400;700&display=swap",
        "messages": {
            "app_title": "LingoSnap",
            "tab_search": "Suche",
            "tab_saved": "Gespeichert",
            "search_hint": "Type an English word... (e.g. Apple)",
            "search_button": "Suchen",
            "loading_title": "Wort wird analysiert, Beispiel und Bild werden erstellt...",
            "loading_subtitle": "Das dauert einen Moment",
            "search_error": "Das Wort wurde leider nicht gefunden oder es ist ein Fehler aufgetreten.",
            "empty_title": "Gib ein Wort zum Lernen ein",
            "empty_subtitle": "Erhalte Bedeutung, Aussprache, ein Beispiel und ein eigenes Bild.",
            "saved_empty_title": "Noch keine Wörter gespeichert",
            "saved_empty_subtitle": "Suche neue Wörter und speichere sie.",
            "save_button": "Wort speichern",
            "remove_button": "Löschen",
            "duplicate_notice": "Dieses Wort ist bereits gespeichert.",
            "save_failed": "Speichern fehlgeschlagen.",
            "select_all": "Alle auswählen",
            "clear_selection": "Auswahl aufheben",
            "selected_count": "{count} Wörter ausgewählt",
            "print_button": "Wörter drucken",
            "print_title": "Meine englischen Vokabeln",
            "print_window_title": "LingoSnap - Meine Wörter",
            "phonetic_label": "Aussprache",
            "example_label": "Example",
            "listen_tooltip": "Listen",
        },
    },
    "ES": {
        "name": "Spanish",
        "html_lang": "es",
        "direction": "ltr",
        "font_family": "Inter",
        "font_url": "https://fonts.googleapis.com/css2?family=Inter:wght@400;700&display=swap",
        "messages": {
            "app_title": "LingoSnap",
            "tab_search": "Buscar",
            "tab_saved": "Guardadas",
            "search_hint": "Type an English word... (e.g. Apple)",
            "search_button": "Buscar",
            "loading_title": "Analizando la palabra y generando ejemplo e imagen...",
            "loading_subtitle": "Esto tarda unos momentos",
            "search_error": "No se encontró la palabra o se produjo un error en el sistema.",
            "empty_title": "Escribe una palabra para aprender",
            "empty_subtitle": "Obtén significado, pronunciación, un ejemplo y una imagen propia.",
            "saved_empty_title": "Aún no has guardado palabras",
            "saved_empty_subtitle": "Busca palabras nuevas y guárdalas.",
            "save_button": "Guardar palabra",
            "remove_button": "Eliminar",
            "duplicate_notice": "Esta palabra ya está guardada.",
            "save_failed": "No se pudo guardar.",
            "select_all": "Seleccionar todo",
            "clear_selection": "Quitar selección",
            "selected_count": "{count} palabras seleccionadas",
            "print_button": "Imprimir palabras",
            "print_title": "Mi lista de palabras en inglés",
            "print_window_title": "LingoSnap - Mis palabras",
            "phonetic_label": "Pronunciación",
            "example_label": "Example",
            "listen_tooltip": "Listen",
        },
    },
}

DEFAULT_LANG = "FA"
