from plan_billing.engine.billing_engine import main

if __name__ == "__main__":
    main()
