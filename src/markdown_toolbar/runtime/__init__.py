"""Runtime services shared by the engine, toolbar and host adapters."""
