DEFAULT_SOURCE = "data/premier-league-matches-2020-2023.csv"
DEFAULT_DELIMITER = ";"
DATASET_URL = "https://www.kaggle.com/datasets/evangower/premier-league-matches-19922022/data"
USER_AGENT    = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/135.0.0.0 Safari/537.36"
)

# CSV schema (header keys, in file order)
REQUIRED_COLUMNS = ["Season_End_Year", "Wk", "Date", "Home", "HomeGoals", "AwayGoals", "Away", "FTR"]
INTEGER_COLUMNS  = ["Season_End_Year", "Wk", "HomeGoals", "AwayGoals"]
GOAL_COLUMNS     = ["HomeGoals", "AwayGoals"]
TEXT_COLUMNS     = ["Home", "Away"]

# Result codes in display order: Home Win, Draw, Away Win
RESULT_CODES = ["H", "D", "A"]
