from data.scene_stats import SCENE_STATS
