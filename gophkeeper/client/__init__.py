"""Client side: data model, configuration, file cache, service logic and command parser."""