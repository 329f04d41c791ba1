from .darklight_switch import darklight_switch, darklight_from_lightcolor, outline_for
