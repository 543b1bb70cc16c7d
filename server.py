from news_push.app import main

# main() reads .env first (ONESIGNAL_APP_ID, ONESIGNAL_REST_KEY, PORT, ...) and serves /news
if __name__ == "__main__":
    main()
