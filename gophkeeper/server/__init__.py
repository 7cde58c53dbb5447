"""Server side: data model, configuration, JSON logging, SQLite storage and service logic."""