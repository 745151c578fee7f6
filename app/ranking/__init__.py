from .ranker import OVERALL, available_selectors, extract_categories, rank_by, score_of
