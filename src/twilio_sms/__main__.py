from twilio_sms.main import main

main()
