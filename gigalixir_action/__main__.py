from .deployment.orchestrator import main

main()
