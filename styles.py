# styles.py

def get_colors(theme="dark"):
    """
    Returns a dictionary with color codes for the dark or the light theme.
    """
    if theme == "light":
        return {
            "background": "#F8F9FA",
            "frame_bg": "#E9ECEF",
            "input_bg": "#DEE2E6",
            "text": "#212529",
            "text_muted": "#6C757D",
            "primary": "#0d6efd",
            "primary_hover": "#338bff",
            "toned_down_bg": "#CED4DA",
            "toned_down_text": "#212529",
            "border": "#CED4DA",
            "success": "#198754",
        }
    return {
        "background": "#212529",
        "frame_bg": "#343A40",
        "input_bg": "#495057",
        "text": "#F8F9FA",
        "text_muted": "#ADB5BD",
        "primary": "#0d6efd",
        "primary_hover": "#338bff",
        "toned_down_bg": "#495057",
        "toned_down_text": "#F8F9FA",
        "border": "#495057",
        "success": "#198754",
    }


def get_button_styles(colors):
    """
    Returns QSS styles for buttons.
    """
    return {
        "toned_down": f"""
            QPushButton {{
                background-color: {colors['toned_down_bg']};
                color: {colors['toned_down_text']};
            }}
            QPushButton:hover {{
                background-color: {colors['primary_hover']};
            }}
        """,
        "copied": f"""
            QPushButton {{
                background-color: {colors['success']};
                color: white;
            }}
        """,
    }


def get_drop_zone_styles(colors):
    """
    Returns QSS styles for the drop zone, idle and while a file is dragged over it.
    """
    return {
        "drop_idle": f"border: 2px dashed {colors['border']}; border-radius: 8px; padding: 24px;",
        "drop_active": f"border: 2px dashed {colors['primary']}; border-radius: 8px; padding: 24px;"
                       f" background-color: {colors['frame_bg']};",
    }


def get_main_stylesheet(colors):
    """
    Returns the main stylesheet for the entire application.
    """
    return f"""
        QWidget {{
            background-color: {colors['background']};
            font-family: Segoe UI, sans-serif;
            color: {colors['text']};
        }}
        QPushButton {{
            border: none;
            border-radius: 6px;
            padding: 8px 14px;
            font-size: 14px;
        }}
        QLabel {{
            font-size: 13px;
        }}
        QLabel#digestValue {{
            font-family: Consolas, monaco, monospace;
            background-color: {colors['input_bg']};
            border-radius: 4px;
            padding: 6px;
        }}
        QLabel#mutedLabel {{
            color: {colors['text_muted']};
        }}
        QFrame {{
            background-color: {colors['frame_bg']};
            border: 1px solid {colors['border']};
            border-radius: 8px;
        }}
    """
