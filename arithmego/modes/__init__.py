"""Game modes, the preset mode registry and selectable durations."""